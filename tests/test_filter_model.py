import random

import pytest

from stealer_search.models import DEFAULT_FIELD, FieldName, FilterModel, FilterRow


@pytest.fixture
def filters():
    model = FilterModel()
    model.changes = []
    model.subscribe(lambda: model.changes.append(len(model)))
    return model


def test_starts_with_pinned_domains_row():
    model = FilterModel()
    assert model.rows == (FilterRow(FieldName.DOMAINS, ""),)
    assert model.rows[0].locked


def test_pinned_row_is_added_when_missing():
    model = FilterModel([FilterRow(FieldName.COUNTRY, "US")])
    assert model.rows[0].field is DEFAULT_FIELD
    assert model.rows[1] == FilterRow(FieldName.COUNTRY, "US")


def test_locked_row_cannot_be_removed(filters):
    assert filters.remove_row(0) is False
    assert len(filters) == 1
    assert filters.changes == []


def test_locked_row_cannot_be_retargeted(filters):
    assert filters.update_field(0, FieldName.EMAILS) is False
    assert filters.rows[0].field is FieldName.DOMAINS
    assert filters.changes == []


def test_locked_row_value_can_change(filters):
    filters.update_value(0, "example.com")
    assert filters.rows[0] == FilterRow(FieldName.DOMAINS, "example.com")
    assert filters.changes == [1]


def test_added_rows_are_editable(filters):
    index = filters.add_row()
    assert filters.rows[index] == FilterRow(None, "")

    assert filters.update_field(index, FieldName.COUNTRY) is True
    filters.update_value(index, "FR")
    assert filters.rows[index] == FilterRow(FieldName.COUNTRY, "FR")

    assert filters.remove_row(index) is True
    assert len(filters) == 1
    assert filters.changes == [2, 2, 2, 1]


def test_row_retargeted_to_domains_becomes_locked(filters):
    index = filters.add_row(FieldName.IPS, "1.2.3.4")
    filters.update_field(index, FieldName.DOMAINS)
    assert filters.remove_row(index) is False
    assert filters.update_field(index, FieldName.IPS) is False


def test_rows_snapshot_is_immutable(filters):
    snapshot = filters.rows
    filters.add_row(FieldName.EMAILS, "a@b.c")
    assert len(snapshot) == 1
    with pytest.raises(AttributeError):
        snapshot[0].value = "x"


def test_update_date_formats_selection(filters):
    from datetime import datetime

    index = filters.add_row(FieldName.INFECTION_DATE_FROM)
    filters.update_date(index, datetime(2024, 3, 5, 7, 8, 9))
    assert filters.rows[index].value == "2024-03-05T07:08:09Z"

    filters.update_date(index, None)
    assert filters.rows[index].value == ""


def test_update_date_rejects_non_date_rows(filters):
    with pytest.raises(ValueError):
        filters.update_date(0, None)


def test_bad_index_raises(filters):
    with pytest.raises(IndexError):
        filters.remove_row(5)
    with pytest.raises(IndexError):
        filters.update_value(5, "x")


def test_random_mutations_keep_default_row():
    rng = random.Random(1234)
    fields = [None, *FieldName]
    model = FilterModel()
    added_domains = 0

    for _ in range(2000):
        op = rng.choice(["add", "remove", "field", "value"])
        if op == "add":
            field = rng.choice(fields)
            model.add_row(field, "v")
            added_domains += field is DEFAULT_FIELD
        elif op == "remove":
            model.remove_row(rng.randrange(len(model)))
        elif op == "field":
            index = rng.randrange(len(model))
            field = rng.choice(fields)
            if model.update_field(index, field) and field is DEFAULT_FIELD:
                added_domains += 1
        else:
            model.update_value(rng.randrange(len(model)), rng.choice(["", "x", "y"]))

        domain_rows = sum(row.field is DEFAULT_FIELD for row in model.rows)
        assert domain_rows >= 1
        assert domain_rows == 1 + added_domains
