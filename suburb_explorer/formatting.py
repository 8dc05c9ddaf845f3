# Number and cell formatting shared by the table, chart and summary cards.
# Output mirrors what the browser would print for the same JSON value.

import json
import math


def is_number(v) -> bool:
    # bool is an int subclass but JSON true/false are not numbers
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def format_count(n: int) -> str:
    return f"{n:,}"


def format_number(n) -> str:
    """1.50k / 2.50M / 3.00B above a thousand, grouped integers, else 2 decimals."""
    try:
        float(n)
    except OverflowError:
        # integers past float range print as the browser's Infinity
        return "Infinity" if n > 0 else "-Infinity"
    a = abs(n)
    if a >= 1_000_000_000:
        return f"{n / 1_000_000_000:.2f}B"
    if a >= 1_000_000:
        return f"{n / 1_000_000:.2f}M"
    if a >= 1_000:
        return f"{n / 1_000:.2f}k"
    if isinstance(n, int) or (math.isfinite(n) and float(n).is_integer()):
        return f"{int(n):,}"
    return f"{n:.2f}"


def js_string(v) -> str:
    # String(v) as a browser renders it: true/false/null, 3 not 3.0
    if v is None:
        return "null"
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float):
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "Infinity" if v > 0 else "-Infinity"
        if v.is_integer() and abs(v) < 1e21:
            return str(int(v))
        return repr(v)
    return str(v)


def format_cell(v) -> str:
    if v is None:
        return ""
    if is_number(v):
        return format_number(v)
    if isinstance(v, (list, dict)):
        return json.dumps(v, separators=(",", ":"), ensure_ascii=False)
    return js_string(v)
