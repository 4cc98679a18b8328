from django.apps import AppConfig


class CadastrosClubeConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'cadastros_clube'

    def ready(self):
        import cadastros_clube.signals
