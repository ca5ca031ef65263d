"""Module that contains data models."""
from .errors import (
    ErrorDetail,
    SearchError,
    ServiceError,
    UnknownError,
    ValidationError,
)
from .fields import DEFAULT_FIELD, FieldKind, FieldName
from .filters import FilterModel, FilterRow
from .infection import ComputerInformation, InfectionRecord
from .search import SearchRequest, SearchResult

__all__ = [
    "ErrorDetail",
    "SearchError",
    "ServiceError",
    "UnknownError",
    "ValidationError",
    "DEFAULT_FIELD",
    "FieldKind",
    "FieldName",
    "FilterModel",
    "FilterRow",
    "ComputerInformation",
    "InfectionRecord",
    "SearchRequest",
    "SearchResult",
]
