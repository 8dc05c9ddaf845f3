# suburb_explorer
# Schema-less JSON -> summary cards, flat table and magnitude bar chart.
# Everything here is pure and synchronous except fetch.ReportFetcher.

from .flatten import flatten, describe
from .numeric import NumericPair, extract_top_numeric, to_number
from .summary import SummaryItem, summarize
from .table import TableGrid, build_table
from .chart import ChartDrawing, render_chart
from .formatting import format_number, format_cell, format_count
from .config import Config, ENDPOINT_OPTIONS, build_url, resolve_slug, curl_command
from .fetch import ReportFetcher, render_report, error_value

__all__ = [
    "flatten", "describe",
    "NumericPair", "extract_top_numeric", "to_number",
    "SummaryItem", "summarize",
    "TableGrid", "build_table",
    "ChartDrawing", "render_chart",
    "format_number", "format_cell", "format_count",
    "Config", "ENDPOINT_OPTIONS", "build_url", "resolve_slug", "curl_command",
    "ReportFetcher", "render_report", "error_value",
]
