from django.apps import AppConfig


class AgendaClubeConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'agenda_clube'
    verbose_name = 'Agenda'
