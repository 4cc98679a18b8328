from django.urls import path
from . import views

urlpatterns = [
    path('associados/', views.relatorio_associados, name='relatorio_associados'),
    path('associados/exportar/excel/', views.exportar_associados_excel, name='exportar_associados_excel'),

    path('financeiro/', views.relatorio_financeiro, name='relatorio_financeiro'),
    path('financeiro/exportar/excel/', views.exportar_financeiro_excel, name='exportar_financeiro_excel'),
    path('financeiro/exportar/pdf/', views.exportar_financeiro_pdf, name='exportar_financeiro_pdf'),
]
