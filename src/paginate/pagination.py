"""Page size and offset resolution."""

from typing import Tuple

from .errors import InvalidPageError
from .models import PaginateConfig, Query


def resolve_page_size(config: PaginateConfig, query: Query) -> int:
    """Requested page size, falling back to the default and capped at the max."""
    if query.page_size == 0:
        return min(config.default_page_size, config.max_page_size)
    return min(query.page_size, config.max_page_size)


def resolve_window(config: PaginateConfig, query: Query) -> Tuple[int, int]:
    """
    Resolve (page_size, offset) for the query's page.

    Raises:
        InvalidPageError: If page is less than 1
    """
    if query.page < 1:
        raise InvalidPageError(f"invalid page: {query.page}", token=str(query.page))
    page_size = resolve_page_size(config, query)
    return page_size, page_size * (query.page - 1)
