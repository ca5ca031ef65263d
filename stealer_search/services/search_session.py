"""Search orchestration for one analyst session."""
from __future__ import annotations

from typing import Any, Callable

from verboselogs import VerboseLogger

from stealer_search.client import SearchClient
from stealer_search.models import (
    FilterModel,
    SearchError,
    SearchRequest,
    SearchResult,
    UnknownError,
)
from stealer_search.services.aggregates import ResultView, build_view
from stealer_search.services.pagination import PaginationController
from stealer_search.services.request_builder import build_request, coerce_page_size

FAILURE_PREFIX = "Failed to fetch infection data"


class SearchInProgressError(RuntimeError):
    """A search was triggered while another one is still running."""


def notification_for(error: SearchError) -> str:
    """Turn a search failure into the single message shown to the analyst."""
    if isinstance(error, UnknownError) or not error.message:
        return FAILURE_PREFIX
    return f"{FAILURE_PREFIX}: {error.message}"


class SearchSession:
    """Ties the filters, the pagination state and the search client together.

    Any filter mutation resets pagination. A failed search leaves filters and
    token as they were so the analyst can retry unchanged.
    """

    def __init__(
        self,
        client: SearchClient,
        filters: FilterModel | None = None,
        pagination: PaginationController | None = None,
        page_size: int = 10,
        notifier: Callable[[str], Any] | None = None,
        logger: VerboseLogger | None = None,
    ) -> None:
        self.logger = logger or VerboseLogger(__name__)
        self.client = client
        self.filters = filters if filters is not None else FilterModel()
        self.pagination = pagination or PaginationController(logger=self.logger)
        self.notifier = notifier or self.logger.error
        self._page_size = coerce_page_size(page_size)
        self.busy = False
        self.result: SearchResult | None = None
        self.view: ResultView | None = None
        self.last_notification: str | None = None
        self._filters_generation = 0

        self.filters.subscribe(self._filters_changed)

    def _filters_changed(self) -> None:
        self._filters_generation += 1
        self.pagination.reset()

    @property
    def page_size(self) -> int:
        return self._page_size

    @page_size.setter
    def page_size(self, raw: Any) -> None:
        self._page_size = coerce_page_size(raw)

    @property
    def action_label(self) -> str:
        return "Process next" if self.pagination.is_continuing else "Search"

    def build_request(self) -> SearchRequest:
        """Request for the next search: a continuation when a token is held."""
        return build_request(self.filters.rows, self._page_size, self.pagination.token)

    async def search(self) -> SearchResult | SearchError:
        """Run a fresh search or fetch the next page.

        Raises
        ------
        SearchInProgressError
            If a search is already running in this session.
        """
        if self.busy:
            raise SearchInProgressError("A search is already in progress.")

        self.busy = True
        try:
            generation = self._filters_generation
            request = self.build_request()
            outcome = await self.client.search(request)
        finally:
            self.busy = False

        match outcome:
            case SearchResult():
                self.result = outcome
                self.view = build_view(outcome)
                self.last_notification = None
                if generation == self._filters_generation:
                    self.pagination.record_response(outcome)
                else:
                    self.logger.verbose("Filters changed during the search, ignoring its continuation token.")

            case SearchError():
                self.last_notification = notification_for(outcome)
                self.notifier(self.last_notification)

        return outcome
