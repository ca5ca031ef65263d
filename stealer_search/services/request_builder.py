"""Translate filter rows into an infections search request."""
from __future__ import annotations

from typing import Any, Iterable

from stealer_search.models import FieldKind, FilterRow, SearchRequest


def coerce_page_size(raw: Any) -> int:
    """Turn a user-typed page size into a positive integer (floor of 1)."""
    try:
        size = int(raw)
    except (TypeError, ValueError):
        return 1
    return max(size, 1)


def build_request(
    rows: Iterable[FilterRow],
    page_size: int,
    continuation_token: str | None = None,
) -> SearchRequest:
    """Build the request payload for one search.

    Parameters
    ----------
    rows : iterable of stealer_search.models.FilterRow
        The active filters, in display order.
    page_size : int
        Positive number of records to fetch.
    continuation_token : str, optional
        Token of the page to resume from.

    Returns
    -------
    stealer_search.models.SearchRequest
        ``size``, then ``next`` when continuing, then one key per field used
        by a row. Rows on an array field are merged into one list in row
        order (duplicates and empty values kept); on a scalar field the last
        row wins.

    """
    request: SearchRequest = {"size": page_size}

    if continuation_token:
        request["next"] = continuation_token

    for row in rows:
        if row.field is None:
            continue

        match row.field.kind:
            case FieldKind.ARRAY:
                values = request.setdefault(row.field.value, [])
                values.append(row.value)  # type: ignore[union-attr]

            case FieldKind.SCALAR | FieldKind.DATE:
                request[row.field.value] = row.value

    return request
