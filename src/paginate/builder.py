"""Builds a BoundQuery from a config and an untrusted query."""

from .clauses import order_by_clause, select_clause
from .models import BoundQuery, PaginateConfig, Query
from .pagination import resolve_window
from .utils.logging import get_logger
from .where import build_where

logger = get_logger(__name__)


def build(config: PaginateConfig, query: Query) -> BoundQuery:
    """
    Validate `query` against `config` and bind it.

    Steps run in a fixed order (select, where + search, order by, page) and
    the first failure aborts the build. config.filter_func, if set, sees the
    bound query before LIMIT and OFFSET are attached.

    Raises:
        PaginateError: If any part of the query violates the config
        TypeError: If filter_func does not return a BoundQuery
    """
    select = select_clause(config, query)
    where, args = build_where(config, query)
    order_by = order_by_clause(config, query)
    page_size, offset = resolve_window(config, query)

    bound = BoundQuery(select=select, where=where, args=args, order_by=order_by)
    if config.filter_func is not None:
        bound = config.filter_func(bound, query)
        if not isinstance(bound, BoundQuery):
            raise TypeError(f"filter_func must return a BoundQuery, got {type(bound).__name__}")

    bound = bound.with_window(page_size, offset)
    logger.debug(
        f"Built query: select={bound.select!r} where={bound.where!r} args={bound.args!r} "
        f"order_by={bound.order_by!r} limit={bound.limit} offset={bound.offset}"
    )
    return bound
