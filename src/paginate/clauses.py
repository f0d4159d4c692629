"""SELECT and ORDER BY clause validation against the config whitelists."""

from typing import List

from .errors import (
    ColumnNotAllowedError,
    NoOrderableColumnsError,
    OrderByFormatError,
    OrderByNotAllowedError,
    SortDirectionError,
)
from .models import PaginateConfig, Query

SORT_DIRECTIONS = ("asc", "desc")

# Placeholder and bind markers; an unrestricted SELECT token must not carry them.
RESERVED_SELECT_CHARS = ("?", ":")


def normalize(token: str) -> str:
    """Canonical form of a column name or filter key."""
    return token.strip().lower()


def _allowed(column: str, whitelist: List[str]) -> bool:
    return any(column == normalize(allowed) for allowed in whitelist)


def select_clause(config: PaginateConfig, query: Query) -> str:
    """
    Build the SELECT column list.

    An empty selectable_cols whitelist means any column may be selected, and
    selecting nothing then means "*". With a whitelist, selecting nothing
    selects every whitelisted column instead of "*".

    Unrestricted tokens are passed through verbatim, except that they may not
    contain placeholder or bind markers ("?" and ":").

    Raises:
        ColumnNotAllowedError: If a requested column is not whitelisted, or
            an unrestricted one carries a placeholder
    """
    columns: List[str] = []
    for token in query.select:
        column = normalize(token)
        if not column:
            continue
        if config.selectable_cols:
            if not _allowed(column, config.selectable_cols):
                raise ColumnNotAllowedError(f"query cannot select column {column!r}", token=column)
        elif any(char in column for char in RESERVED_SELECT_CHARS):
            raise ColumnNotAllowedError(f"query cannot select {column!r}: contains a placeholder", token=column)
        columns.append(column)

    if columns:
        return ", ".join(columns)
    if not config.selectable_cols:
        return "*"
    return ", ".join(normalize(col) for col in config.selectable_cols)


def order_by_clause(config: PaginateConfig, query: Query) -> str:
    """
    Build the ORDER BY list, keeping the order the query asked for.

    Each token is "<column>" or "<column> asc|desc". Returns "" when the query
    does not ask for any ordering.
    """
    parts: List[str] = []
    for token in query.order_by:
        words = normalize(token).split()
        if not words:
            continue
        if len(words) > 2:
            raise OrderByFormatError(f"invalid order_by clause {token!r}", token=token)
        if len(words) == 2 and words[1] not in SORT_DIRECTIONS:
            raise SortDirectionError(f"invalid sort direction in order_by clause {token!r}", token=token)
        if not config.orderable_cols:
            raise NoOrderableColumnsError(
                f"query cannot order by {token!r}: no orderable columns configured",
                token=token,
            )
        if not _allowed(words[0], config.orderable_cols):
            raise OrderByNotAllowedError(f"query cannot order by field {token!r}", token=token)
        parts.append(" ".join(words))
    return ", ".join(parts)
