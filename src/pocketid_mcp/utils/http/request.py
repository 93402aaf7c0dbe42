"""Request construction helpers for the Pocket ID API.

This module composes absolute request URLs from the configured base URL,
a path and an optional query mapping, and projects pagination parameters
onto the bracketed query grammar Pocket ID expects::

    pagination[page]=2&pagination[limit]=10&sort[column]=name

Everything here is pure: no I/O and no shared state.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote, urlencode

PAGE_KEY = "pagination[page]"
LIMIT_KEY = "pagination[limit]"
SEARCH_KEY = "search"
SORT_COLUMN_KEY = "sort[column]"
SORT_DIRECTION_KEY = "sort[direction]"


@dataclass(frozen=True)
class PaginationParams:
    """Optional list parameters accepted by paginated endpoints.

    :param page: 1-based page number
    :param limit: Items per page
    :param search: Free-text search filter
    :param sort_column: Column to sort by
    :param sort_direction: ``asc`` or ``desc``
    """

    page: Optional[int] = None
    limit: Optional[int] = None
    search: Optional[str] = None
    sort_column: Optional[str] = None
    sort_direction: Optional[str] = None


# Field -> query key, in emission order
_PAGINATION_KEYS = (
    ("page", PAGE_KEY),
    ("limit", LIMIT_KEY),
    ("search", SEARCH_KEY),
    ("sort_column", SORT_COLUMN_KEY),
    ("sort_direction", SORT_DIRECTION_KEY),
)


def build_pagination_query(
    pagination: Optional[Union[PaginationParams, Mapping[str, Any]]] = None,
) -> Dict[str, str]:
    """Project pagination parameters onto a flat query mapping.

    Each present field maps to exactly one query key. Fields that are
    absent or ``None`` contribute nothing; they are never sent as empty
    strings.

    :param pagination: Parameters as a dataclass or a snake_case mapping
    :type pagination: Optional[Union[PaginationParams, Mapping[str, Any]]]
    :return: Query mapping in a stable key order
    :rtype: Dict[str, str]

    .. example::
       >>> build_pagination_query(PaginationParams(page=2, limit=10))
       {'pagination[page]': '2', 'pagination[limit]': '10'}
    """
    query: Dict[str, str] = {}
    if pagination is None:
        return query

    for field_name, key in _PAGINATION_KEYS:
        if isinstance(pagination, Mapping):
            value = pagination.get(field_name)
        else:
            value = getattr(pagination, field_name)
        if value is not None:
            query[key] = str(value)
    return query


def build_url(
    base_url: str, path: str, query: Optional[Mapping[str, Any]] = None
) -> str:
    """Build an absolute URL from base URL, path and query.

    The path is appended verbatim and must carry its leading slash. A
    non-empty query is percent-encoded (spaces become ``%20``) in
    insertion order; an empty or missing query never appends ``?``.

    :param base_url: Base URL without trailing slashes
    :type base_url: str
    :param path: Request path starting with ``/``
    :type path: str
    :param query: Optional query parameters
    :type query: Optional[Mapping[str, Any]]
    :return: Absolute request URL
    :rtype: str
    """
    url = f"{base_url}{path}"
    if not query:
        return url
    return f"{url}?{urlencode(query, quote_via=quote)}"


def quote_segment(value: str) -> str:
    """Percent-encode a single path segment taken from caller input."""
    return quote(str(value), safe="")
