"""HTTP client for the infections search endpoint."""
from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError as PayloadValidationError
from verboselogs import VerboseLogger

from stealer_search.models import (
    ErrorDetail,
    SearchError,
    SearchRequest,
    SearchResult,
    ServiceError,
    UnknownError,
    ValidationError,
)
from stealer_search.models.errors import DEFAULT_ERROR_MESSAGE

SEARCH_PATH = "infections/_search"


def create_http_client(base_url: str, api_key: str) -> httpx.AsyncClient:
    """Build the transport shared by every search, with the static bearer credential."""
    return httpx.AsyncClient(
        base_url=base_url,
        headers={"Authorization": f"Bearer {api_key}"},
    )


def _error_detail(entry: dict[str, Any]) -> ErrorDetail:
    location = entry.get("loc") or ()
    if isinstance(location, str):
        location = (location,)
    return ErrorDetail(
        location=tuple(str(part) for part in location),
        message=str(entry.get("msg") or ""),
        type=str(entry.get("type") or ""),
    )


def parse_error_payload(
    payload: Any, status_code: int | None = None
) -> ValidationError | ServiceError:
    """Normalize the body of a failed search.

    Parameters
    ----------
    payload : Any
        The decoded JSON body, or None when the body wasn't JSON.
    status_code : int, optional
        The HTTP status of the response.

    Returns
    -------
    ValidationError or ServiceError
        A ValidationError when ``details`` lists field problems, a
        ServiceError carrying the best single message otherwise.

    """
    if not isinstance(payload, dict):
        return ServiceError(DEFAULT_ERROR_MESSAGE, status_code=status_code)

    request_id = payload.get("request_id") or None
    details = payload.get("details")

    entries = [entry for entry in details if isinstance(entry, dict)] if isinstance(details, list) else []

    if entries:
        return ValidationError(
            tuple(_error_detail(entry) for entry in entries),
            status_code=status_code,
            request_id=request_id,
        )

    if not isinstance(details, str):
        details = None

    reason = details or payload.get("error_message") or DEFAULT_ERROR_MESSAGE
    return ServiceError(str(reason), status_code=status_code, request_id=request_id)


class SearchClient:
    """Issues infection searches and returns either a result page or a SearchError.

    Transport and protocol failures never escape ``search``; there is no retry.
    """

    def __init__(self, http_client: httpx.AsyncClient, logger: VerboseLogger | None = None) -> None:
        self.http_client = http_client
        self.logger = logger or VerboseLogger(__name__)

    async def __aenter__(self) -> SearchClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def search(self, request: SearchRequest) -> SearchResult | SearchError:
        """Run one search request.

        Parameters
        ----------
        request : stealer_search.models.SearchRequest
            The payload built from the active filters.

        Returns
        -------
        stealer_search.models.SearchResult or stealer_search.models.SearchError

        """
        self.logger.verbose(f"Searching infections: {request}")

        try:
            response = await self.http_client.post(SEARCH_PATH, json=request)
        except httpx.HTTPError as err:
            self.logger.error(f"Search request failed: {err!r}")
            return UnknownError(cause=repr(err))

        if response.is_error:
            return self._error_from_response(response)

        try:
            result = SearchResult.model_validate(response.json())
        except (ValueError, PayloadValidationError) as err:
            self.logger.error(f"Unreadable search response ({response.status_code}): {err}")
            return UnknownError(cause=str(err), status_code=response.status_code)

        self.logger.info(
            f"Fetched {len(result.records)} of {result.total_count} infections"
            f" (credits left: {result.credits_left})."
        )
        return result

    def _error_from_response(self, response: httpx.Response) -> ValidationError | ServiceError:
        if response.status_code == httpx.codes.UNAUTHORIZED:
            self.logger.error("Unauthorized access. Check the configured API key.")

        try:
            payload = response.json()
        except ValueError:
            payload = None

        error = parse_error_payload(payload, status_code=response.status_code)
        self.logger.warning(
            f"Search rejected ({response.status_code}, request id: {error.request_id}): {error.message}"
        )
        return error
