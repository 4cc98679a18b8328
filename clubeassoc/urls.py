from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('core.urls')),       # Login, dashboard, usuários e API
    path('associados/', include('cadastros_clube.urls')),
    path('financeiro/', include('financeiro_clube.urls')),
    path('agenda/', include('agenda_clube.urls')),
    path('relatorios/', include('relatorios_clube.urls')),
]
