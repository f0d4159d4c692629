"""Pydantic models for paginate configs, queries and bound queries."""

from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 1000


class Query(BaseModel):
    """
    A query instance, usually built from user input.

    Every field is untrusted and is checked against a PaginateConfig before
    anything reaches the database.
    """

    select: List[str] = Field(default_factory=list, description="Columns to select; empty selects everything allowed")
    where_args: Dict[str, Any] = Field(default_factory=dict, description="Filter key -> value, matched against PaginateConfig.where")
    page_size: int = Field(default=0, ge=0, description="Rows per page; 0 uses the config default")
    page: int = Field(default=1, description="1-based page number")
    order_by: List[str] = Field(default_factory=list, description='Tokens like "name" or "age desc"')
    search: str = Field(default="", description="Free-text term applied to every LIKE filter")


class BoundQuery(BaseModel):
    """
    Validated query fragments, ready for a database layer to execute.

    Placeholders in `where` are positional ("?") and `args` lists their values
    left to right.
    """

    model_config = ConfigDict(frozen=True)

    select: str = "*"
    where: str = ""
    args: List[Any] = Field(default_factory=list)
    order_by: str = ""
    limit: Optional[int] = None
    offset: Optional[int] = None

    def and_where(self, clause: str, *args: Any) -> "BoundQuery":
        """Return a copy with `clause` ANDed onto the existing where fragment."""
        clause = clause.strip()
        if not clause:
            return self
        where = f"({self.where}) AND {clause}" if self.where else clause
        return self.model_copy(update={"where": where, "args": [*self.args, *args]})

    def with_window(self, limit: int, offset: int) -> "BoundQuery":
        """Return a copy with LIMIT and OFFSET attached."""
        return self.model_copy(update={"limit": limit, "offset": offset})

    def to_sql(self, table: str) -> Tuple[str, List[Any]]:
        """
        Render a full SELECT statement against `table`.

        Returns:
            (sql, args) where sql uses "?" placeholders and args includes the
            limit and offset values when a window is attached.
        """
        parts = [f"SELECT {self.select or '*'} FROM {table}"]
        args = list(self.args)
        if self.where:
            parts.append(f"WHERE {self.where}")
        if self.order_by:
            parts.append(f"ORDER BY {self.order_by}")
        if self.limit is not None:
            parts.append("LIMIT ? OFFSET ?")
            args.extend([self.limit, self.offset or 0])
        return " ".join(parts), args


FilterFunc = Callable[[BoundQuery, Query], BoundQuery]


class PaginateConfig(BaseModel):
    """
    Server-side policy for one endpoint: what a Query may select, filter and
    order by, and how large a page may be.

    The config is frozen and page size defaults are resolved when it is
    built, so one instance can serve concurrent requests.
    """

    model_config = ConfigDict(frozen=True)

    selectable_cols: List[str] = Field(default_factory=list, description="Selectable columns; empty means no restriction")
    where: Dict[str, str] = Field(
        default_factory=dict,
        description='Filter key -> SQL fragment, e.g. {"id": "> ?", "name": "like ?"}',
    )
    orderable_cols: List[str] = Field(default_factory=list, description="Columns a query may order by")
    default_page_size: int = Field(default=0, ge=0, validate_default=True, description=f"Defaults to {DEFAULT_PAGE_SIZE} when 0")
    max_page_size: int = Field(default=0, ge=0, validate_default=True, description=f"Defaults to {MAX_PAGE_SIZE} when 0")
    disallow_search_term: bool = Field(default=False, description="Reject queries that carry a search term")
    filter_func: Optional[FilterFunc] = Field(
        default=None,
        description="Hook applied after WHERE/ORDER BY and before LIMIT/OFFSET",
        exclude=True,
    )

    @field_validator("where")
    @classmethod
    def _canonical_where_keys(cls, where: Dict[str, str]) -> Dict[str, str]:
        canonical: Dict[str, str] = {}
        for key, fragment in where.items():
            k = key.strip().lower()
            if k in canonical:
                raise ValueError(f"where key {key!r} collides with another key after normalization")
            canonical[k] = fragment
        return canonical

    @field_validator("default_page_size")
    @classmethod
    def _resolve_default_page_size(cls, value: int) -> int:
        return value or DEFAULT_PAGE_SIZE

    @field_validator("max_page_size")
    @classmethod
    def _resolve_max_page_size(cls, value: int) -> int:
        return value or MAX_PAGE_SIZE
