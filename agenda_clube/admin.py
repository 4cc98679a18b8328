from django.contrib import admin
from .models import Agendamento

@admin.register(Agendamento)
class AgendamentoAdmin(admin.ModelAdmin):
    list_display = ['data', 'nome_responsavel', 'contato', 'valor_cobrado']
    list_filter = ['data']
    search_fields = ['nome_responsavel', 'contato']
    date_hierarchy = 'data'
