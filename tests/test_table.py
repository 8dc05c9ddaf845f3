"""Table Renderer: column sampling, cell text and the key/value grid."""

from __future__ import annotations

import pytest

from suburb_explorer.table import SAMPLE_ROWS, TableGrid, build_table

pytestmark = pytest.mark.unit


def test_columns_are_first_seen_union() -> None:
    grid = build_table([{"a": 1, "b": 2}, {"a": 3, "c": 4}])
    assert grid.columns == ["a", "b", "c"]
    assert grid.rows == [["1", "2", ""], ["3", "", "4"]]
    assert grid.note == "Showing 2 rows, 3 columns."


def test_columns_come_from_the_sample_but_all_rows_render() -> None:
    """Keys first seen after the sampled rows are dropped; rows are not."""

    rows = [{"id": i} for i in range(SAMPLE_ROWS)] + [{"id": 99, "late": "x"}]
    grid = build_table(rows)
    assert grid.columns == ["id"]
    assert len(grid.rows) == SAMPLE_ROWS + 1
    assert grid.rows[-1] == ["99"]


def test_cell_formatting() -> None:
    grid = build_table([{"n": 1500, "f": 3.14159, "o": {"x": 1}, "l": [1, "a"], "z": None, "t": True, "s": "hi"}])
    assert grid.rows == [["1.50k", "3.14", '{"x":1}', '[1,"a"]', "", "true", "hi"]]


def test_non_record_rows_render_empty() -> None:
    grid = build_table([{"a": 1}, 5, None, "text"])
    assert grid.columns == ["a"]
    assert grid.rows == [["1"], [""], [""], [""]]


def test_empty_array_gives_empty_grid() -> None:
    assert build_table([]) == TableGrid([], [], "Showing 0 rows, 0 columns.")


def test_object_becomes_key_value_grid_at_depth_two() -> None:
    grid = build_table({"suburb": "Testville", "stats": {"median": 1250000, "deep": {"x": {"y": 1}}}, "tags": ["a", "b"]})
    assert grid.columns == ["key", "value"]
    assert grid.rows == [
        ["suburb", "Testville"],
        ["stats.median", "1.25M"],
        ["stats.deep.x", "Object(1 keys)"],
        ["tags.__len", "2"],
        ["tags[0]", "a"],
        ["tags[1]", "b"],
    ]
    assert grid.note == "6 fields. Nested collections are flattened."


@pytest.mark.parametrize("value", [None, 1, "x", True])
def test_scalars_have_no_table(value) -> None:
    assert build_table(value) is None


def test_array_rows_use_index_columns() -> None:
    grid = build_table([[1, 2], [3, 4, 5], {"0": "x", "name": "y"}])
    assert grid.columns == ["0", "1", "2", "name"]
    assert grid.rows == [["1", "2", "", ""], ["3", "4", "5", ""], ["x", "", "", "y"]]


def test_integers_beyond_float_range_do_not_break_the_grid() -> None:
    grid = build_table([{"id": 10**400, "neg": -(10**400)}])
    assert grid.rows == [["Infinity", "-Infinity"]]
    assert build_table({"id": 10**400}).rows == [["id", "Infinity"]]
