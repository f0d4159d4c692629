"""Runs bound queries on a SQLAlchemy session and returns one page of rows."""

from typing import Any, List, Type, Union

from pydantic import BaseModel
from sqlalchemy import bindparam, text
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import TextClause

from ..builder import build
from ..models import PaginateConfig, Query
from ..utils.logging import get_logger

logger = get_logger(__name__)

PLACEHOLDER = "?"


class Page(BaseModel):
    """One page of results. An empty page is a valid result, not an error."""

    items: List[Any]
    page: int
    page_size: int
    offset: int


def _escape_colons(sql: str) -> str:
    return sql.replace(":", "\\:")


def to_text_clause(sql: str, args: List[Any]) -> TextClause:
    """
    Convert positional "?" placeholders into named SQLAlchemy bind parameters.

    Literal colons in the SQL (e.g. Postgres "::int" casts) are escaped so
    text() does not read them as binds. Values are attached with bindparam(),
    so the returned clause carries its own parameters.

    Raises:
        ValueError: If the placeholder count does not match the argument count
    """
    pieces = sql.split(PLACEHOLDER)
    if len(pieces) - 1 != len(args):
        raise ValueError(f"query has {len(pieces) - 1} placeholders but {len(args)} arguments: {sql}")

    out = [_escape_colons(pieces[0])]
    binds = []
    for i, (value, piece) in enumerate(zip(args, pieces[1:])):
        name = f"arg_{i}"
        out.append(f":{name}")
        out.append(_escape_colons(piece))
        binds.append(bindparam(name, value))
    return text("".join(out)).bindparams(*binds)


def fetch_page(
    session: Session,
    source: Union[str, Type[Any]],
    config: PaginateConfig,
    query: Query,
) -> Page:
    """
    Validate `query` against `config` and fetch the requested page.

    Validation happens before any SQL is issued, so a rejected query never
    touches the database.

    Args:
        session: SQLAlchemy session
        source: Table name, or a declarative model class whose rows should be
            returned as (transient) model instances
        config: Endpoint policy
        query: Untrusted query

    Returns:
        Page of dict rows, or model instances when `source` is a model class

    Raises:
        PaginateError: If the query violates the config
    """
    if isinstance(source, str):
        table, model = source, None
    else:
        table, model = source.__tablename__, source

    bound = build(config, query)
    sql, args = bound.to_sql(table)
    clause = to_text_clause(sql, args)
    logger.debug(f"Executing: {sql} args={args!r}")

    rows = [dict(row) for row in session.execute(clause).mappings()]
    items: List[Any] = [model(**row) for row in rows] if model is not None else rows
    logger.debug(f"Fetched {len(items)} rows from {table} (page {query.page})")
    return Page(items=items, page=query.page, page_size=bound.limit, offset=bound.offset)
