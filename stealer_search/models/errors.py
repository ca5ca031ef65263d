"""Normalized failures of a search call."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"


@dataclass(frozen=True)
class ErrorDetail:
    """One field-level problem reported by the service.

    Attributes
    ----------
    location : tuple of str
        Path of the offending input (``loc``), e.g. ``("body", "size")``.
    message : str
        The problem description (``msg``).
    type : str
        The service's error type tag.
    """

    location: tuple[str, ...]
    message: str
    type: str = ""

    def render(self) -> str:
        return f"{' -> '.join(self.location)}: {self.message}"


@dataclass(frozen=True)
class SearchError(ABC):
    """Base class of the failures returned by the search client."""

    status_code: int | None = field(default=None, kw_only=True)
    request_id: str | None = field(default=None, kw_only=True)

    @property
    @abstractmethod
    def message(self) -> str:
        """Text shown to the analyst."""


@dataclass(frozen=True)
class ValidationError(SearchError):
    """The service rejected some request fields."""

    details: tuple[ErrorDetail, ...] = ()

    @property
    def message(self) -> str:
        return ", ".join(detail.render() for detail in self.details)


@dataclass(frozen=True)
class ServiceError(SearchError):
    """The service answered with a single error message."""

    reason: str = DEFAULT_ERROR_MESSAGE

    @property
    def message(self) -> str:
        return self.reason


@dataclass(frozen=True)
class UnknownError(SearchError):
    """The failure carried nothing the client could interpret."""

    cause: str = ""

    @property
    def message(self) -> str:
        return ""
