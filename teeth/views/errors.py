"""
JSON error responses

Installed as handler404/handler500 in the root URLconf. Django logs the
exception behind a 500 through the django.request logger; only a generic
message reaches the caller.
"""
from django.http import JsonResponse


def error_response(code, message):
    return JsonResponse({
        'code': code,
        'message': message,
    }, status=code)


def not_found(request, exception=None):
    return error_response(404, 'not found')


def server_error(request):
    return error_response(500, 'internal server error')
