"""Errors raised while validating a query against its config.

Every error carries a stable code and the offending token so API layers can
return a structured response instead of an empty result set.
"""

from typing import Any, Dict, Optional


class PaginateError(ValueError):
    """Base class for all query validation failures."""

    code = "PAGINATE_ERROR"

    def __init__(self, message: str, token: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.token = token

    def to_dict(self) -> Dict[str, Any]:
        """Structured form of the error for API responses."""
        return {"code": self.code, "message": self.message, "token": self.token}


class PolicyViolationError(PaginateError):
    """The query asked for something the config does not allow."""

    code = "POLICY_VIOLATION"


class ColumnNotAllowedError(PolicyViolationError):
    code = "COLUMN_NOT_ALLOWED"


class OrderByFormatError(PolicyViolationError):
    code = "INVALID_ORDER_BY"


class SortDirectionError(PolicyViolationError):
    code = "INVALID_SORT_DIRECTION"


class OrderByNotAllowedError(PolicyViolationError):
    code = "ORDER_BY_NOT_ALLOWED"


class WhereArgumentNotAllowedError(PolicyViolationError):
    code = "WHERE_ARGUMENT_NOT_ALLOWED"


class WhereKeyCollisionError(PolicyViolationError):
    """Two where arguments normalize to the same key (e.g. "Age" and "age ")."""

    code = "WHERE_KEY_COLLISION"


class SearchDisallowedError(PolicyViolationError):
    code = "SEARCH_DISALLOWED"


class InvalidPageError(PaginateError):
    """Page numbers start at 1."""

    code = "INVALID_PAGE"


class ConfigurationError(PaginateError):
    """The config cannot serve the query at all."""

    code = "CONFIGURATION_ERROR"


class NoOrderableColumnsError(ConfigurationError):
    code = "NO_ORDERABLE_COLUMNS"
