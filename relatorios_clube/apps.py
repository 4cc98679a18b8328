from django.apps import AppConfig


class RelatoriosClubeConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'relatorios_clube'
    verbose_name = 'Relatórios'
