"""Data model to hold the analyst's active search filters."""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Callable

from stealer_search.dates import format_api_date

from .fields import DEFAULT_FIELD, FieldName


@dataclass(frozen=True)
class FilterRow:
    """Class defining one search criterion.

    Attributes
    ----------
    field : stealer_search.models.fields.FieldName, optional
        The searched field, unset on a freshly added row.
    value : str
        Raw user input.
    """

    field: FieldName | None = None
    value: str = ""

    @property
    def locked(self) -> bool:
        """Whether the row holds the pinned default field."""
        return self.field is DEFAULT_FIELD


class FilterModel:
    """Ordered set of filter rows.

    Rows on the default field are locked: they can't be removed and their
    field can't be changed. Listeners registered with ``subscribe`` are
    called after every applied mutation.
    """

    def __init__(self, rows: list[FilterRow] | None = None) -> None:
        self._rows: list[FilterRow] = list(rows) if rows else [FilterRow(DEFAULT_FIELD)]
        if not any(row.locked for row in self._rows):
            self._rows.insert(0, FilterRow(DEFAULT_FIELD))
        self._listeners: list[Callable[[], None]] = []

    @property
    def rows(self) -> tuple[FilterRow, ...]:
        return tuple(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def subscribe(self, callback: Callable[[], None]) -> None:
        self._listeners.append(callback)

    def _changed(self) -> None:
        for callback in self._listeners:
            callback()

    def add_row(self, field: FieldName | None = None, value: str = "") -> int:
        """Append a row and return its index."""
        self._rows.append(FilterRow(field, value))
        self._changed()
        return len(self._rows) - 1

    def remove_row(self, index: int) -> bool:
        """Remove a row. Locked rows are left in place and False is returned."""
        if self._rows[index].locked:
            return False
        del self._rows[index]
        self._changed()
        return True

    def update_field(self, index: int, field: FieldName | None) -> bool:
        """Retarget a row. Locked rows are left unchanged and False is returned."""
        row = self._rows[index]
        if row.locked:
            return False
        self._rows[index] = replace(row, field=field)
        self._changed()
        return True

    def update_value(self, index: int, value: str) -> None:
        self._rows[index] = replace(self._rows[index], value=value)
        self._changed()

    def update_date(self, index: int, selected: datetime | date | None) -> None:
        """Store a date selection on a date-field row in the wire format.

        Raises
        ------
        ValueError
            If the row's field is not a date field.
        """
        field = self._rows[index].field
        if field is None or not field.is_date:
            raise ValueError(f"Row {index} is not a date filter ({field})")
        self.update_value(index, format_api_date(selected))
