"""Request forms: declare an endpoint's request shape once, get a Query out.

Example:

    class PersonForm(QueryForm):
        age: Optional[int] = where_field()
        name: Optional[str] = where_field(key="full_name")

    query = PersonForm.model_validate(request_params).to_query()
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .models import PaginateConfig, Query
from .wildcard import patch_like_query

WHERE_CLAUSE = "where"


def where_field(key: Optional[str] = None, default: Any = None, **kwargs: Any) -> Any:
    """
    Declare a form field that feeds Query.where_args.

    Args:
        key: Filter key; defaults to the snake_case field name
        default: Field default (zero values are never sent as filters)
    """
    extra: Dict[str, Any] = {"clause": WHERE_CLAUSE}
    if key:
        extra["key"] = key.strip().lower()
    if "default_factory" not in kwargs:
        kwargs["default"] = default
    return Field(json_schema_extra=extra, **kwargs)


def snake_case(name: str) -> str:
    """
    Convert a CamelCase name to snake_case.

    Runs of capitals stay together, so "UserID" becomes "user_id" and
    "HTTPDirectoryID" becomes "httpdirectory_id".
    """
    if not name:
        return ""
    out = [name[0].lower()]
    last = name[0]
    for ch in name[1:]:
        if ch.isupper() and not last.isupper() and last != "_":
            out.append("_")
        out.append(ch.lower())
        last = ch
    return "".join(out)


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, int, float, str, bytes, list, tuple, dict, set)):
        return not value
    return False


class QueryForm(BaseModel):
    """Base request form carrying the paging, ordering and search fields."""

    page: int = 1
    page_size: int = Field(default=0, ge=0)
    order_by: List[str] = Field(default_factory=list)
    select: List[str] = Field(default_factory=list)
    search: str = ""

    @field_validator("order_by", "select", mode="before")
    @classmethod
    def _single_string_as_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    def where_args(self) -> Dict[str, Any]:
        """Values of all declared where fields that are set to a non-zero value."""
        args: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            extra = field.json_schema_extra
            if not isinstance(extra, dict) or extra.get("clause") != WHERE_CLAUSE:
                continue
            value = getattr(self, name)
            if _is_zero(value):
                continue
            args[extra.get("key") or snake_case(name)] = value
        return args

    def to_query(self, query: Optional[Query] = None) -> Query:
        """
        Build a Query from this form.

        When `query` is given it is copied, not modified: page, page_size and
        search are replaced, select and order_by are appended to, and where
        arguments are merged in.
        """
        base = query if query is not None else Query()
        return base.model_copy(
            update={
                "page": self.page,
                "page_size": self.page_size,
                "search": self.search,
                "select": [*base.select, *self.select],
                "order_by": [*base.order_by, *self.order_by],
                "where_args": {**base.where_args, **self.where_args()},
            },
            deep=True,
        )


def patch_like_form_query(config: PaginateConfig, query: Query) -> Query:
    """Wrap LIKE arguments and the search term in "%" on both sides."""
    return patch_like_query(config, query, prepend=True, append=True)
