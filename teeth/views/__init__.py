"""
Views for ToothSearch
"""
from .search_views import search_teeth
from .errors import error_response, not_found, server_error

__all__ = [
    'search_teeth',
    'error_response',
    'not_found',
    'server_error',
]
