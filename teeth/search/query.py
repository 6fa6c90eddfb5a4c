"""
Turns SearchParams into a catalog filter, ordering and page window
"""
import operator
from dataclasses import dataclass
from functools import reduce

from django.db.models import Q

from teeth.models import ToothVersion

# Fields a free-text term is matched against (case-insensitive substring).
# On SQLite, LIKE folds case for ASCII letters only; PostgreSQL folds all of Unicode.
TEXT_SEARCH_FIELDS = ('repo_owner', 'repo_name', 'name', 'description', 'author')


@dataclass(frozen=True)
class QuerySpec:
    """
    Storage-side description of one search.

    filters are ANDed, each applied as its own .filter() call. ordering is a
    single column: rows that tie on it come back in whatever order the
    database picks, which may differ between pages.
    """
    filters: tuple
    ordering: str
    offset: int
    limit: int


def term_filter(term):
    """Match term in any of the text search fields"""
    return reduce(
        operator.or_,
        (Q(**{f'{field}__icontains': term}) for field in TEXT_SEARCH_FIELDS),
    )


def tag_filter(tag):
    return Q(tags__name=tag)


def build_query(params):
    filters = [term_filter(term) for term in params.terms]
    filters += [tag_filter(tag) for tag in params.tag_filters]
    filters.append(Q(is_latest=True))

    return QuerySpec(
        filters=tuple(filters),
        ordering=params.order.apply(params.sort.field_name),
        offset=params.offset,
        limit=params.per_page,
    )


def find_and_count_all(spec, queryset=None):
    """
    Run spec against the catalog.

    Returns (matched_count, rows) where matched_count covers every match and
    rows holds only the requested page, with tags prefetched.
    """
    if queryset is None:
        queryset = ToothVersion.objects.all()

    # Separate .filter() calls give each tag its own join, so every tag
    # filter must be satisfied rather than all of them by one tag row.
    for condition in spec.filters:
        queryset = queryset.filter(condition)

    count = queryset.count()
    rows = list(
        queryset.order_by(spec.ordering)
        .prefetch_related('tags')[spec.offset:spec.offset + spec.limit]
    )
    return count, rows


def total_pages(count, per_page):
    return -(-count // per_page)
