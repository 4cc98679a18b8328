from django.urls import path
from . import api, views

urlpatterns = [
    # Rota pública (login / criar conta)
    path('', views.login_view, name='login'),
    path('cadastro/', views.cadastro, name='cadastro'),
    path('logout/', views.logout_view, name='logout'),

    path('dashboard/', views.dashboard, name='dashboard'),

    # Configurações: usuários do sistema
    path('configuracoes/usuarios/', views.lista_usuarios, name='lista_usuarios'),
    path('configuracoes/usuarios/novo/', views.novo_usuario_sistema, name='novo_usuario_sistema'),
    path('configuracoes/usuarios/<int:pk>/editar/', views.editar_usuario, name='editar_usuario'),
    path('configuracoes/usuarios/<int:pk>/excluir/', views.excluir_usuario, name='excluir_usuario'),

    # Endpoints de gestão de usuários (Bearer)
    path('api/usuarios/criar/', api.criar_usuario, name='api_criar_usuario'),
    path('api/usuarios/gerenciar/', api.gerenciar_usuario, name='api_gerenciar_usuario'),
]
