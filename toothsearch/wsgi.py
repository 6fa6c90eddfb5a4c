"""
WSGI config for ToothSearch
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'toothsearch.settings')

application = get_wsgi_application()
