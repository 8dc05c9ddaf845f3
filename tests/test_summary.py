"""Summary Builder: cards for arrays, objects, scalars and the Context label."""

from __future__ import annotations

import pytest

from suburb_explorer.summary import SummaryItem, summarize

pytestmark = pytest.mark.unit


def test_object_with_suburb_context() -> None:
    items = summarize({"suburb": "Testville", "population": 1000})
    assert items == [
        SummaryItem("Fields", "2"),
        SummaryItem("Type", "Object"),
        SummaryItem("Context", "Testville"),
    ]


def test_array_counts_items_and_sample_fields() -> None:
    rows = [{"a": 1, "b": {"c": 2, "d": 3}}] + [{"a": i} for i in range(1499)]
    items = summarize(rows)
    assert items == [
        SummaryItem("Items", "1,500"),
        SummaryItem("Fields (sample)", "3"),
        SummaryItem("Type", "Array"),
    ]


def test_empty_array() -> None:
    assert summarize([]) == [
        SummaryItem("Items", "0"),
        SummaryItem("Fields (sample)", "0"),
        SummaryItem("Type", "Array"),
    ]


def test_object_field_count_is_grouped() -> None:
    payload = {f"k{i}": i for i in range(1200)}
    assert summarize(payload)[0] == SummaryItem("Fields", "1,200")


@pytest.mark.parametrize(
    "value, type_name",
    [("hi", "string"), (3, "number"), (2.5, "number"), (True, "boolean"), (None, "object")],
)
def test_scalars_report_their_type(value, type_name) -> None:
    assert summarize(value)[0] == SummaryItem("Type", type_name)


def test_context_lookup_order_and_truncation() -> None:
    long_name = "N" * 60
    items = summarize({"area": "Hunter", "name": long_name, "suburb": ""})
    assert items[-1] == SummaryItem("Context", "N" * 48)


def test_context_from_non_string_value() -> None:
    assert summarize({"area": 2290})[-1] == SummaryItem("Context", "2290")


def test_no_context_when_keys_missing_or_empty() -> None:
    items = summarize({"suburb": "", "name": None, "area": 0, "info": {"suburb": "Nested"}})
    assert [i.label for i in items] == ["Fields", "Type"]


def test_array_root_has_no_context() -> None:
    items = summarize([{"suburb": "Testville"}])
    assert "Context" not in [i.label for i in items]
