from django.contrib import admin
from .models import CategoriaConta, Lancamento

@admin.register(Lancamento)
class LancamentoAdmin(admin.ModelAdmin):
    list_display = ['data', 'descricao', 'valor', 'tipo', 'categoria']
    list_filter = ['tipo', 'categoria', 'data']
    search_fields = ['descricao', 'categoria__nome']
    date_hierarchy = 'data'

@admin.register(CategoriaConta)
class CategoriaAdmin(admin.ModelAdmin):
    list_display = ['nome', 'tipo']
    list_filter = ['tipo']
