from django.urls import path
from . import views

urlpatterns = [
    # 1. Calendário do mês (?ano=2025&mes=4)
    path('', views.calendario_mensal, name='calendario_mensal'),

    # 2. Dia específico (criar / ver / editar / excluir)
    path('dia/<str:data>/', views.dia_agenda, name='dia_agenda'),
]
