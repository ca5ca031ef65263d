"""Table rows and chart aggregates derived from a page of results."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import tzinfo
from typing import Any, Iterable

from stealer_search.dates import parse_api_datetime
from stealer_search.models import InfectionRecord, SearchResult

UNKNOWN_LABEL = "Unknown"


def count_by_stealer_type(records: Iterable[InfectionRecord]) -> dict[str, int]:
    """Count records per stealer family, in order of first appearance."""
    return dict(Counter(record.stealer_type or UNKNOWN_LABEL for record in records))


def infection_day(record: InfectionRecord, tz: tzinfo | None = None) -> str:
    """Return the local calendar day (YYYY-MM-DD) a record was infected on."""
    infected_at = parse_api_datetime(record.computer_information.infection_date)
    if infected_at is None:
        return UNKNOWN_LABEL
    if infected_at.tzinfo is not None:
        # astimezone(None) converts to the system's local zone.
        infected_at = infected_at.astimezone(tz)
    return infected_at.date().isoformat()


def count_by_infection_date(
    records: Iterable[InfectionRecord], tz: tzinfo | None = None
) -> dict[str, int]:
    """Count records per infection day, in order of first appearance."""
    return dict(Counter(infection_day(record, tz) for record in records))


def table_rows(records: Iterable[InfectionRecord]) -> list[dict[str, str]]:
    """Flatten records into table rows keyed by column."""
    rows = []
    for record in records:
        host = record.computer_information
        rows.append(
            {
                "key": record.id,
                "log_file_name": record.log_file_name,
                "stealer_type": record.stealer_type or "",
                "infection_date": host.infection_date,
                "ip": host.ip,
                "country": host.country,
                "os": host.os,
                "malware_path": host.malware_path,
                "username": host.username,
                "hwid": host.hwid,
            }
        )
    return rows


@dataclass(frozen=True)
class ResultView:
    """Everything the rendering layer needs for one result page.

    Attributes
    ----------
    rows : list of dict
        Table rows, see ``table_rows``.
    stealer_types : dict
        Record count per stealer type.
    timeline : dict
        Record count per infection day.
    total_items : int
        Matches across all pages.
    next_token : str, optional
        Token of the following page.
    """

    rows: list[dict[str, str]] = field(default_factory=list)
    stealer_types: dict[str, int] = field(default_factory=dict)
    timeline: dict[str, int] = field(default_factory=dict)
    total_items: int = 0
    next_token: str | None = None

    def pie_data(self) -> list[dict[str, Any]]:
        return [{"name": name, "value": count} for name, count in self.stealer_types.items()]

    def timeline_data(self) -> list[dict[str, Any]]:
        return [{"date": day, "count": count} for day, count in self.timeline.items()]


def build_view(result: SearchResult, tz: tzinfo | None = None) -> ResultView:
    """Recompute the table and both aggregates from a result page."""
    return ResultView(
        rows=table_rows(result.records),
        stealer_types=count_by_stealer_type(result.records),
        timeline=count_by_infection_date(result.records, tz),
        total_items=result.total_count,
        next_token=result.next_token,
    )
