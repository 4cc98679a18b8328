from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import CustomUser, PapelUsuario

# --- USUÁRIOS ---
class PapelInline(admin.TabularInline):
    model = PapelUsuario
    readonly_fields = ['criado_em']
    extra = 0

class CustomUserAdmin(UserAdmin):
    model = CustomUser
    list_display = ['email', 'nome', 'is_active', 'is_staff']
    search_fields = ['email', 'nome']
    ordering = ['nome', 'email']

    fieldsets = UserAdmin.fieldsets + (
        ('Clube', {
            'fields': ('nome',)
        }),
    )

    inlines = [PapelInline]

admin.site.register(CustomUser, CustomUserAdmin)

# --- PAPÉIS ---
@admin.register(PapelUsuario)
class PapelUsuarioAdmin(admin.ModelAdmin):
    list_display = ['usuario', 'papel', 'criado_em']
    list_filter = ['papel']
    search_fields = ['usuario__email', 'usuario__nome']
