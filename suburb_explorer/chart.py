# Chart Renderer: ranked numeric pairs -> horizontal bar chart draw ops.
# The page replays the ops on a <canvas>; nothing here touches a DOM.

import math
from dataclasses import dataclass, field

from .formatting import format_number

LEFT_PAD = 180    # label column
RIGHT_PAD = 16    # value text
TOP_PAD = 16
BOTTOM_PAD = 12
ROW_H = 22
GAP = 8
MIN_BAR = 2
LABEL_MAX = 34
LABEL_KEEP = 31

BACKGROUND = "#0b152a"
LABEL_COLOR = "#93a1b5"
VALUE_COLOR = "#e6edf6"
POSITIVE = "#5b9cff"
NEGATIVE = "#ff8b5b"
FONT = "12px Inter, sans-serif"


@dataclass
class ChartDrawing:
    width: int
    height: int
    ops: list = field(default_factory=list)
    note: str = ""

    def rect(self, x, y, w, h, fill):
        self.ops.append({"kind": "rect", "x": x, "y": y, "w": w, "h": h, "fill": fill})

    def text(self, x, y, text, fill, font=FONT):
        self.ops.append({"kind": "text", "x": x, "y": y, "text": text, "fill": fill, "font": font})


def chart_height(rows: int) -> int:
    return TOP_PAD + (ROW_H + GAP) * rows + BOTTOM_PAD


def clip_label(label: str) -> str:
    if len(label) > LABEL_MAX:
        return label[:LABEL_KEEP] + "…"
    return label


def render_chart(pairs, canvas_width: int):
    """Draw ops for one bar per pair, or None when there is nothing to draw.

    Bars are scaled against the largest magnitude so the top pair fills the
    space between the label column and the value text.
    """
    if not pairs:
        return None
    d = ChartDrawing(canvas_width, chart_height(len(pairs)),
                     note=f"Top {len(pairs)} numeric fields by magnitude (auto-detected).")
    d.rect(0, 0, d.width, d.height, BACKGROUND)

    max_val = max(abs(p.value) for p in pairs) or 1
    bar_max = canvas_width - LEFT_PAD - RIGHT_PAD
    for i, p in enumerate(pairs):
        y = TOP_PAD + i * (ROW_H + GAP)
        d.text(8, y + 14, clip_label(p.label), LABEL_COLOR)
        w = max(MIN_BAR, math.floor(abs(p.value) / max_val * bar_max + 0.5))
        d.rect(LEFT_PAD, y, w, ROW_H, POSITIVE if p.value >= 0 else NEGATIVE)
        d.text(LEFT_PAD + w + 6, y + 14, format_number(p.value), VALUE_COLOR)
    return d
