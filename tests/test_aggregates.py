from datetime import timedelta, timezone

from fakes import infection, page
from stealer_search.models import InfectionRecord, SearchResult
from stealer_search.services.aggregates import (
    build_view,
    count_by_infection_date,
    count_by_stealer_type,
    table_rows,
)


def records(*payloads):
    return [InfectionRecord.model_validate(p) for p in payloads]


def test_counts_by_stealer_type():
    items = records(infection("1", "RedLine"), infection("2", "Vidar"), infection("3", "RedLine"))
    assert count_by_stealer_type(items) == {"RedLine": 2, "Vidar": 1}


def test_missing_stealer_type_is_unknown():
    items = records(infection("1", None), infection("2", ""), infection("3", "Raccoon"))
    assert count_by_stealer_type(items) == {"Unknown": 2, "Raccoon": 1}


def test_counts_by_calendar_day():
    items = records(
        infection("1", infection_date="2024-05-01T10:00:00Z"),
        infection("2", infection_date="2024-05-01T23:59:59Z"),
        infection("3", infection_date="2024-05-03T00:10:00Z"),
    )
    assert count_by_infection_date(items, timezone.utc) == {"2024-05-01": 2, "2024-05-03": 1}


def test_days_follow_the_local_zone():
    items = records(infection("1", infection_date="2024-05-01T23:30:00Z"))
    plus_two = timezone(timedelta(hours=2))
    assert count_by_infection_date(items, plus_two) == {"2024-05-02": 1}


def test_naive_and_unreadable_dates():
    items = records(
        infection("1", infection_date="2024-05-01T23:30:00"),
        infection("2", infection_date=""),
        infection("3", infection_date="yesterday"),
    )
    assert count_by_infection_date(items, timezone.utc) == {"2024-05-01": 1, "Unknown": 2}


def test_table_rows_flatten_records():
    (row,) = table_rows(records(infection("abc", "Lumma", ip="1.2.3.4", country="FR")))
    assert row["key"] == "abc"
    assert row["log_file_name"] == "abc.zip"
    assert row["stealer_type"] == "Lumma"
    assert row["ip"] == "1.2.3.4"
    assert row["country"] == "FR"
    assert row["hwid"] == "HW-1"


def test_null_host_fields_are_empty():
    record = InfectionRecord.model_validate(
        {"id": 7, "log_file_name": None, "computer_information": {"ip": None, "country": "DE"}}
    )
    assert record.id == "7"
    assert record.log_file_name == ""
    assert record.computer_information.ip == ""
    assert record.computer_information.country == "DE"


def test_build_view_recomputes_everything():
    result = SearchResult.model_validate(
        page(
            [infection("1", "RedLine"), infection("2", "Vidar"), infection("3", "RedLine")],
            next_token="tok",
            total=300,
        )
    )
    view = build_view(result, timezone.utc)

    assert len(view.rows) == 3
    assert view.total_items == 300
    assert view.next_token == "tok"
    assert view.pie_data() == [{"name": "RedLine", "value": 2}, {"name": "Vidar", "value": 1}]
    assert view.timeline_data() == [{"date": "2024-05-01", "count": 3}]


def test_empty_page_view():
    view = build_view(SearchResult.model_validate(page([])))
    assert view.rows == []
    assert view.pie_data() == []
    assert view.timeline_data() == []
