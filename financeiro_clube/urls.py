from django.urls import path
from . import views

urlpatterns = [
    # 1. LANÇAMENTOS
    path('', views.LancamentoListView.as_view(), name='lancamento_list'),
    path('lancamentos/novo/', views.LancamentoCreateView.as_view(), name='lancamento_create'),
    path('lancamentos/<int:pk>/editar/', views.LancamentoUpdateView.as_view(), name='lancamento_update'),
    path('lancamentos/<int:pk>/deletar/', views.LancamentoDeleteView.as_view(), name='lancamento_delete'),

    # 2. PLANO DE CONTAS
    path('categorias/', views.CategoriaListView.as_view(), name='categoria_list'),
    path('categorias/nova/', views.CategoriaCreateView.as_view(), name='categoria_create'),
    path('categorias/<int:pk>/editar/', views.CategoriaUpdateView.as_view(), name='categoria_update'),
    path('categorias/<int:pk>/deletar/', views.CategoriaDeleteView.as_view(), name='categoria_delete'),
]
