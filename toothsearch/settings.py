"""
Django settings for ToothSearch

Every setting that differs between deployments is read from the environment.
PostgreSQL is used when POSTGRES_HOST is set, SQLite otherwise.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

ENV_DEFAULTS = {
    'DJANGO_ALLOWED_HOSTS': '*',
    'DJANGO_DEBUG': '0',
    'DJANGO_SECRET_KEY': 'insecure-development-key',
    'LOG_LEVEL': 'INFO',
    'POSTGRES_DATABASE': 'postgres',
    'POSTGRES_HOST': '',
    'POSTGRES_PASSWORD': 'postgres',
    'POSTGRES_PORT': '5432',
    'POSTGRES_USER': 'postgres',
    'TOOTH_REPO_HOST': 'github.com',
}


def env(name):
    return os.environ.get(name, ENV_DEFAULTS[name])


SECRET_KEY = env('DJANGO_SECRET_KEY')

DEBUG = env('DJANGO_DEBUG').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = [h.strip() for h in env('DJANGO_ALLOWED_HOSTS').split(',') if h.strip()]

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'teeth',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'toothsearch.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'toothsearch.wsgi.application'

# Database
if env('POSTGRES_HOST'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': env('POSTGRES_DATABASE'),
            'USER': env('POSTGRES_USER'),
            'PASSWORD': env('POSTGRES_PASSWORD'),
            'HOST': env('POSTGRES_HOST'),
            'PORT': env('POSTGRES_PORT'),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

# Host prefixed to "<owner>/<name>" when building repository paths
TOOTH_REPO_HOST = env('TOOTH_REPO_HOST')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': env('LOG_LEVEL').upper(),
    },
}
