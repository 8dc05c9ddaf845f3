# Summary cards: a few descriptive label/value pairs for any payload.

import math
from dataclasses import dataclass

from .flatten import flatten
from .formatting import format_count, is_number, js_string

CONTEXT_KEYS = ("suburb", "name", "area")
CONTEXT_WIDTH = 48


@dataclass(frozen=True)
class SummaryItem:
    label: str
    value: str


def type_name(v) -> str:
    # typeof in the browser; null reports as "object"
    if isinstance(v, bool):
        return "boolean"
    if is_number(v):
        return "number"
    if isinstance(v, str):
        return "string"
    return "object"


def _truthy(v) -> bool:
    if isinstance(v, float) and math.isnan(v):
        return False
    return bool(v)


def summarize(value) -> list:
    out = []
    if isinstance(value, list):
        first = value[0] if value and _truthy(value[0]) else {}
        out.append(SummaryItem("Items", format_count(len(value))))
        out.append(SummaryItem("Fields (sample)", str(len(flatten(first)))))
        out.append(SummaryItem("Type", "Array"))
    elif isinstance(value, dict):
        out.append(SummaryItem("Fields", format_count(len(flatten(value)))))
        out.append(SummaryItem("Type", "Object"))
    else:
        out.append(SummaryItem("Type", type_name(value)))

    flat = flatten(value)
    context = next((flat[k] for k in CONTEXT_KEYS if _truthy(flat.get(k))), None)
    if context is not None:
        out.append(SummaryItem("Context", js_string(context)[:CONTEXT_WIDTH]))
    return out
