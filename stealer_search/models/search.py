"""Data model to define a page of search results."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .infection import InfectionRecord

# Request payload: request key -> value, list of values or page size.
SearchRequest = dict[str, str | list[str] | int]


class SearchResult(BaseModel):
    """Class defining one page returned by ``infections/_search``.

    Attributes
    ----------
    records : tuple of InfectionRecord
        The page's infection logs (``data`` on the wire).
    total_count : int
        Number of matches across all pages (``total_items_count``).
    next_token : str, optional
        Continuation token (``next``), None once the result set is exhausted.
    credits_left : int or float, optional
        Remaining search credits of the account.
    items_count : int, optional
        Number of records in this page.
    search_consumed_credits : int or float, optional
        Credits charged for this page.
    search_id : str, optional
        Identifier of the search on the service side.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    records: tuple[InfectionRecord, ...] = Field(default=(), alias="data")
    total_count: int = Field(default=0, alias="total_items_count")
    next_token: str | None = Field(default=None, alias="next")
    credits_left: int | float | None = None
    items_count: int | None = None
    search_consumed_credits: int | float | None = None
    search_id: str | None = None

    @field_validator("records", mode="before")
    @classmethod
    def null_records(cls, value: Any) -> Any:
        return () if value is None else value

    @field_validator("total_count", mode="before")
    @classmethod
    def null_total(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("next_token", mode="before")
    @classmethod
    def empty_token_as_none(cls, value: Any) -> Any:
        return value or None
