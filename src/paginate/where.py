"""WHERE clause assembly, including the search term fan-out."""

from typing import Any, Dict, List, Tuple

from .clauses import normalize
from .errors import SearchDisallowedError, WhereArgumentNotAllowedError, WhereKeyCollisionError
from .models import PaginateConfig, Query


def is_like_fragment(fragment: str) -> bool:
    """True if the fragment uses the LIKE operator (any case)."""
    return "like" in fragment.lower()


def like_keys(config: PaginateConfig) -> List[str]:
    """Sorted keys of all where clauses that use LIKE."""
    return sorted(key for key, fragment in config.where.items() if is_like_fragment(fragment))


def canonical_where_args(query: Query) -> Dict[str, Any]:
    """
    Normalize where_args keys.

    Raises:
        WhereKeyCollisionError: If two input keys normalize to the same key
    """
    canonical: Dict[str, Any] = {}
    originals: Dict[str, str] = {}
    for key, value in query.where_args.items():
        k = normalize(key)
        if k in canonical:
            raise WhereKeyCollisionError(
                f"where arguments {originals[k]!r} and {key!r} both resolve to {k!r}",
                token=k,
            )
        canonical[k] = value
        originals[k] = key
    return canonical


def build_where(config: PaginateConfig, query: Query) -> Tuple[str, List[Any]]:
    """
    Build the WHERE fragment and its positional arguments.

    where_args are ANDed together in sorted key order. A search term is
    matched against every LIKE clause in the config, ORed together, and the
    OR group is ANDed onto the explicit filters:

        age > ? AND (first_name like ? OR last_name like ?)

    Returns:
        (fragment, args); fragment is "" when nothing is filtered

    Raises:
        SearchDisallowedError: If the config disallows search and one is given
        WhereKeyCollisionError: If two where_args keys normalize to the same key
        WhereArgumentNotAllowedError: If a where_args key has no where clause
    """
    if config.disallow_search_term and query.search:
        raise SearchDisallowedError("search term is disallowed by config", token=query.search)

    # Sorted so the fragment and args are reproducible.
    values = canonical_where_args(query)
    args: List[Any] = []
    and_group: List[str] = []
    for key in sorted(values):
        fragment = config.where.get(key)
        if fragment is None:
            raise WhereArgumentNotAllowedError(f"where argument {key!r} not allowed", token=key)
        and_group.append(f"{key} {fragment}")
        args.append(values[key])

    if not query.search:
        return " AND ".join(and_group), args

    or_group: List[str] = []
    for key in like_keys(config):
        or_group.append(f"{key} {config.where[key]}")
        args.append(query.search)

    where = " AND ".join(and_group)
    if where and or_group:
        where = f"{where} AND ({' OR '.join(or_group)})"
    elif or_group:
        where = " OR ".join(or_group)
    return where, args
