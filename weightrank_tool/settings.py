"""
Django settings for weightrank_tool.

The project has no web surface: Django provides configuration, logging and
the ``rank_pages`` management command that drives the ranking engine. No
database is configured.

Please consult the Django documentation for additional configuration
options: https://docs.djangoproject.com/en/4.2/ref/settings/
"""

from __future__ import annotations

import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

DEBUG = os.getenv('DJANGO_DEBUG', 'false').lower() == 'true'

# Application definition
INSTALLED_APPS = [
    'weightrank',
]

DATABASES: dict[str, dict[str, object]] = {}

USE_TZ = True

TIME_ZONE = 'UTC'


# Ranking engine configuration
WEIGHTRANK_CONFIG = os.getenv('WEIGHTRANK_CONFIG', str(BASE_DIR / 'weightrank.yaml'))

# Overrides the engine config's max_iterations when set.
WEIGHTRANK_MAX_ITERATIONS: int | None = None

max_iterations_env = os.getenv('WEIGHTRANK_MAX_ITERATIONS')
if max_iterations_env:
    try:
        WEIGHTRANK_MAX_ITERATIONS = int(max_iterations_env)
    except ValueError as exc:
        raise ImproperlyConfigured('WEIGHTRANK_MAX_ITERATIONS must be an integer.') from exc
    if WEIGHTRANK_MAX_ITERATIONS < 1:
        raise ImproperlyConfigured('WEIGHTRANK_MAX_ITERATIONS must be positive.')


log_level = os.getenv('DJANGO_LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '%(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'plain',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': log_level,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': log_level,
            'propagate': False,
        },
        # Propagates to the root console handler; rank_pages --debug lowers the level.
        'weightrank': {
            'level': os.getenv('WEIGHTRANK_LOG_LEVEL', 'WARNING').upper(),
        },
    },
}
