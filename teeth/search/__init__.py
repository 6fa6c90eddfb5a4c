"""
Catalog search: parameter parsing, query building and response shaping
"""
from .params import BadRequestError, SearchParams, SortKey, SortOrder, parse_params, params_from_query_dict
from .query import QuerySpec, build_query, find_and_count_all, total_pages
from .results import ConsistencyWarning, build_response, check_non_repeatability, project_entry

__all__ = [
    'BadRequestError',
    'SearchParams',
    'SortKey',
    'SortOrder',
    'parse_params',
    'params_from_query_dict',
    'QuerySpec',
    'build_query',
    'find_and_count_all',
    'total_pages',
    'ConsistencyWarning',
    'build_response',
    'check_non_repeatability',
    'project_entry',
]
