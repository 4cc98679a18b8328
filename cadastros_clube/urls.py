from django.urls import path
from . import views

urlpatterns = [
    # Associados
    path('', views.AssociadoListView.as_view(), name='associado_list'),
    path('novo/', views.AssociadoCreateView.as_view(), name='associado_create'),
    path('<int:pk>/', views.AssociadoDetailView.as_view(), name='associado_detail'),
    path('<int:pk>/editar/', views.AssociadoUpdateView.as_view(), name='associado_update'),
    path('<int:pk>/deletar/', views.AssociadoDeleteView.as_view(), name='associado_delete'),

    # Familiares
    path('<int:pk>/familiares/novo/', views.familiar_create, name='familiar_create'),
    path('<int:pk>/familiares/<int:familiar_pk>/editar/', views.familiar_update, name='familiar_update'),
    path('<int:pk>/familiares/<int:familiar_pk>/deletar/', views.familiar_delete, name='familiar_delete'),
]
