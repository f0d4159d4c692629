"""Wraps LIKE arguments and search terms in SQL wildcards."""

from .clauses import normalize
from .models import PaginateConfig, Query
from .where import like_keys

WILDCARD = "%"


def _wrap(value: str, prepend: bool, append: bool) -> str:
    if WILDCARD in value:
        return value
    if prepend:
        value = WILDCARD + value
    if append:
        value = value + WILDCARD
    return value


def patch_like_query(config: PaginateConfig, query: Query, prepend: bool = True, append: bool = True) -> Query:
    """
    Return a copy of `query` with "%" added around LIKE arguments.

    Only string where_args whose key maps to a LIKE clause are patched, and
    the search term is patched whenever it is set. Values that already
    contain a "%" are left alone, so patching twice changes nothing. Neither
    `config` nor `query` is modified.
    """
    likes = set(like_keys(config))
    where_args = {}
    for key, value in query.where_args.items():
        if isinstance(value, str) and normalize(key) in likes:
            value = _wrap(value, prepend, append)
        where_args[key] = value

    search = _wrap(query.search, prepend, append) if query.search else query.search
    return query.model_copy(update={"where_args": where_args, "search": search}, deep=True)
