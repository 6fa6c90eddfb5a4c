"""
Query-string parsing for the tooth search endpoint

Raw parameters are strings (or absent). Nothing past parse_params sees them
in that form: the result is a SearchParams with narrowed, typed values.
"""
import re
from dataclasses import dataclass
from enum import Enum

NATURAL_NUMBER_RE = re.compile(r'[1-9][0-9]*')

MAX_PER_PAGE = 100
MAX_PAGE_LENGTH = 15

TAG_PREFIX = 'tag:'

PARAM_DEFAULTS = {
    'q': '',
    'perPage': '20',
    'page': '1',
    'sort': 'starCount',
    'order': 'descending',
}


class BadRequestError(ValueError):
    """Raised when a search parameter is malformed."""


class SortKey(Enum):
    STAR_COUNT = 'starCount'
    CREATED_AT = 'createdAt'
    UPDATED_AT = 'updatedAt'

    @property
    def field_name(self):
        """Catalog column this key sorts on"""
        return _SORT_FIELDS[self]


_SORT_FIELDS = {
    SortKey.STAR_COUNT: 'star_count',
    SortKey.CREATED_AT: 'repo_created_at',
    SortKey.UPDATED_AT: 'released_at',
}


class SortOrder(Enum):
    ASCENDING = 'ascending'
    DESCENDING = 'descending'

    def apply(self, field_name):
        """Return field_name as a Django ordering expression"""
        if self is SortOrder.DESCENDING:
            return f'-{field_name}'
        return field_name


@dataclass(frozen=True)
class SearchParams:
    terms: tuple
    tag_filters: tuple
    per_page: int
    page: int
    sort: SortKey
    order: SortOrder

    @property
    def offset(self):
        return (self.page - 1) * self.per_page


def is_natural_number(value):
    return NATURAL_NUMBER_RE.fullmatch(value) is not None


def params_from_query_dict(query_dict):
    """
    Narrow a Django QueryDict to one optional string per known parameter.

    A parameter repeated in the query string is rejected rather than
    silently collapsed to its last value.
    """
    raw = {}
    for name in PARAM_DEFAULTS:
        values = query_dict.getlist(name)
        if len(values) > 1:
            raise BadRequestError(f"parameter {name} must be a string: {values}")
        raw[name] = values[0] if values else None
    return raw


def split_query(q):
    """
    Split q on single spaces into free-text terms and tag filters.

    Tokens with no ':' are terms; 'tag:<value>' tokens contribute <value>
    (possibly empty). Any other token containing ':' is dropped.
    """
    tokens = [token for token in q.split(' ') if token]
    terms = tuple(token for token in tokens if ':' not in token)
    tag_filters = tuple(
        token[len(TAG_PREFIX):] for token in tokens if token.startswith(TAG_PREFIX))
    return terms, tag_filters


def validate_params(per_page, page, sort, order):
    if not is_natural_number(per_page):
        raise BadRequestError(f"parameter perPage must be a natural number: {per_page}")
    # Length first: int() refuses digit strings past sys.get_int_max_str_digits()
    if len(per_page) > len(str(MAX_PER_PAGE)) or int(per_page) > MAX_PER_PAGE:
        raise BadRequestError(
            f"parameter perPage must be less than or equal to {MAX_PER_PAGE}: {per_page}")

    if not is_natural_number(page):
        raise BadRequestError(f"parameter page must be a natural number: {page}")
    if len(page) > MAX_PAGE_LENGTH:
        raise BadRequestError(f"parameter page is too large: {page}")

    if sort not in {key.value for key in SortKey}:
        raise BadRequestError(
            f"parameter sort must be one of starCount, createdAt, updatedAt: {sort}")

    if order not in {o.value for o in SortOrder}:
        raise BadRequestError(
            f"parameter order must be one of ascending, descending: {order}")


def parse_params(raw):
    """
    Parse raw search parameters into SearchParams.

    raw maps parameter names to strings; missing keys and None values take
    their defaults. Raises BadRequestError on the first violated constraint.
    """
    values = {
        name: raw.get(name) if raw.get(name) is not None else default
        for name, default in PARAM_DEFAULTS.items()
    }

    validate_params(values['perPage'], values['page'], values['sort'], values['order'])

    terms, tag_filters = split_query(values['q'])
    return SearchParams(
        terms=terms,
        tag_filters=tag_filters,
        per_page=int(values['perPage']),
        page=int(values['page']),
        sort=SortKey(values['sort']),
        order=SortOrder(values['order']),
    )
