from django.urls import re_path
from . import views

app_name = 'teeth'

urlpatterns = [
    re_path(r'^search/teeth/?$', views.search_teeth, name='search_teeth'),
]
