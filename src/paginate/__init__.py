"""Search, filtering and pagination guarded by a server-side whitelist.

A PaginateConfig says what an endpoint allows; a Query carries what the
caller asked for. build() validates one against the other and returns a
BoundQuery, and fetch_page() runs it on a SQLAlchemy session.
"""

from .builder import build
from .database.executor import Page, fetch_page
from .errors import (
    ColumnNotAllowedError,
    ConfigurationError,
    InvalidPageError,
    NoOrderableColumnsError,
    OrderByFormatError,
    OrderByNotAllowedError,
    PaginateError,
    PolicyViolationError,
    SearchDisallowedError,
    SortDirectionError,
    WhereArgumentNotAllowedError,
    WhereKeyCollisionError,
)
from .models import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, BoundQuery, PaginateConfig, Query
from .wildcard import patch_like_query

__all__ = [
    "BoundQuery",
    "ColumnNotAllowedError",
    "ConfigurationError",
    "DEFAULT_PAGE_SIZE",
    "InvalidPageError",
    "MAX_PAGE_SIZE",
    "NoOrderableColumnsError",
    "OrderByFormatError",
    "OrderByNotAllowedError",
    "Page",
    "PaginateConfig",
    "PaginateError",
    "PolicyViolationError",
    "Query",
    "SearchDisallowedError",
    "SortDirectionError",
    "WhereArgumentNotAllowedError",
    "WhereKeyCollisionError",
    "build",
    "fetch_page",
    "patch_like_query",
]
