"""Continuation token lifecycle across searches."""
from __future__ import annotations

from dataclasses import dataclass

from verboselogs import VerboseLogger

from stealer_search.models import SearchResult


@dataclass(frozen=True)
class Fresh:
    """No token held: the next search starts from the first page."""


@dataclass(frozen=True)
class Continuing:
    """A token from the last response: the next search resumes from it."""

    token: str


PaginationState = Fresh | Continuing


class PaginationController:
    """Owns the continuation token between one response and the next request.

    Building a request doesn't consume the token; only a new response or a
    filter change replaces it.
    """

    def __init__(self, logger: VerboseLogger | None = None) -> None:
        self.logger = logger or VerboseLogger(__name__)
        self._state: PaginationState = Fresh()

    @property
    def state(self) -> PaginationState:
        return self._state

    @property
    def token(self) -> str | None:
        match self._state:
            case Continuing(token=token):
                return token
            case _:
                return None

    @property
    def is_continuing(self) -> bool:
        return isinstance(self._state, Continuing)

    def resume(self, token: str) -> None:
        """Continue from a token obtained elsewhere (e.g. a previous run)."""
        self._state = Continuing(token) if token else Fresh()

    def reset(self) -> None:
        """Drop any held token."""
        if self.is_continuing:
            self.logger.verbose("Filters changed, discarding continuation token.")
        self._state = Fresh()

    def record_response(self, result: SearchResult) -> None:
        """Move to the state announced by a completed search."""
        if result.next_token:
            self._state = Continuing(result.next_token)
            self.logger.debug(f"Holding continuation token {result.next_token!r}.")
        else:
            self._state = Fresh()
            self.logger.debug("Result set exhausted.")
