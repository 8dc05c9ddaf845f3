# Table Renderer: array of records -> rows x columns, object -> key/value rows.

from dataclasses import dataclass, field

from .flatten import flatten
from .formatting import format_cell, format_count

# columns come from the first SAMPLE_ROWS rows only; keys that first appear
# later are not shown even though every row is rendered
SAMPLE_ROWS = 40
OBJECT_DEPTH = 2


@dataclass
class TableGrid:
    columns: list
    rows: list = field(default_factory=list)
    note: str = ""


def row_keys(row) -> list:
    # objects give their keys, arrays their indices "0".."n-1"
    if isinstance(row, dict):
        return list(row)
    if isinstance(row, list):
        return [str(i) for i in range(len(row))]
    return []


def cell_value(row, col):
    if isinstance(row, dict):
        return row.get(col)
    if isinstance(row, list) and col.isascii() and col.isdigit() and str(int(col)) == col:
        i = int(col)
        return row[i] if i < len(row) else None
    return None


def sample_columns(rows, sample=SAMPLE_ROWS) -> list:
    seen = {}
    for row in rows[:sample]:
        for k in row_keys(row):
            seen.setdefault(k, None)
    return list(seen)


def build_table(value):
    """Grid for an array or object payload, None for anything else."""
    if isinstance(value, list):
        cols = sample_columns(value)
        rows = [[format_cell(cell_value(row, c)) for c in cols] for row in value]
        note = f"Showing {format_count(len(value))} rows, {len(cols)} columns."
        return TableGrid(cols, rows, note)
    if isinstance(value, dict):
        flat = flatten(value, OBJECT_DEPTH)
        rows = [[k, format_cell(v)] for k, v in flat.items()]
        return TableGrid(["key", "value"], rows, f"{len(flat)} fields. Nested collections are flattened.")
    return None
