"""
Search endpoint for the tooth catalog
"""
import logging

from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from teeth.search import BadRequestError, build_query, build_response, find_and_count_all, parse_params, params_from_query_dict
from .errors import error_response

logger = logging.getLogger(__name__)


@require_http_methods(["GET"])
def search_teeth(request):
    """
    Search the latest version of every tooth.

    Query parameters: q, perPage, page, sort, order. Malformed parameters
    answer 400 before the catalog is touched.
    """
    try:
        params = parse_params(params_from_query_dict(request.GET))
    except BadRequestError as e:
        logger.debug(f"rejected search parameters: {e}")
        return error_response(400, str(e))

    count, rows = find_and_count_all(build_query(params))

    return JsonResponse(build_response(count, rows, params, settings.TOOTH_REPO_HOST))
