"""
URL configuration for ToothSearch
"""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('teeth.urls')),
]

handler404 = 'teeth.views.errors.not_found'
handler500 = 'teeth.views.errors.server_error'
