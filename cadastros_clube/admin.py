from django.contrib import admin
from .models import Associado, Familiar

class FamiliarInline(admin.TabularInline):
    model = Familiar
    extra = 0

@admin.register(Associado)
class AssociadoAdmin(admin.ModelAdmin):
    list_display = ('nome_completo', 'cpf', 'contato_celular', 'status', 'data_associacao')
    list_filter = ('status',)
    search_fields = ('nome_completo', 'cpf', 'contato_email')
    inlines = [FamiliarInline]

@admin.register(Familiar)
class FamiliarAdmin(admin.ModelAdmin):
    list_display = ('nome', 'parentesco', 'associado', 'data_nascimento')
    list_filter = ('parentesco',)
    search_fields = ('nome', 'associado__nome_completo')
