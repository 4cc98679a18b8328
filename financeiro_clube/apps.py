from django.apps import AppConfig


class FinanceiroClubeConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'financeiro_clube'
    verbose_name = 'Financeiro'
