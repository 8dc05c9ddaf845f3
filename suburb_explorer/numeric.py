# Numeric Extractor: pick the largest-magnitude numeric leaves for the chart.

import math
import re
from dataclasses import dataclass

from .flatten import flatten
from .formatting import is_number

MAX_PAIRS = 12

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_RADIX = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


@dataclass(frozen=True)
class NumericPair:
    label: str
    value: float


def to_number(v):
    """Coerce a leaf the way Number() does in the browser; None if not numeric.

    Strings are trimmed, an empty string is 0, 0x/0o/0b literals and
    +/-Infinity are accepted. Anything else (bool, None, containers) is None.
    """
    if is_number(v):
        return v
    if not isinstance(v, str):
        return None
    s = v.strip()
    if not s:
        return 0
    if s in ("Infinity", "+Infinity"):
        return math.inf
    if s == "-Infinity":
        return -math.inf
    if _RADIX.fullmatch(s):
        return int(s, 0)
    if _DECIMAL.fullmatch(s):
        return float(s)
    return None


def _finite(n) -> bool:
    try:
        return math.isfinite(n)
    except OverflowError:
        # integers too large for a float
        return False


def extract_top_numeric(value) -> list:
    pairs = []
    for label, leaf in flatten(value).items():
        n = to_number(leaf)
        if n is None or not _finite(n):
            continue
        # zero has no bar length, it never ranks
        if n == 0:
            continue
        pairs.append(NumericPair(label, n))
    pairs.sort(key=lambda p: abs(p.value), reverse=True)
    return pairs[:MAX_PAIRS]
