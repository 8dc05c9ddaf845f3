# Fetch Orchestrator: one GET per user action, then the pipeline or an error.
# No retries. A failed fetch never reaches the pipeline.

import json
import logging
from dataclasses import asdict

import requests

from .chart import render_chart
from .config import Config, build_url
from .numeric import extract_top_numeric
from .summary import summarize
from .table import build_table

log = logging.getLogger(__name__)

DEFAULT_WIDTH = 800


def strict_json(text: str):
    # NaN / Infinity are not JSON; refuse them like a browser would
    try:
        obj = json.loads(text)
        json.dumps(obj, allow_nan=False)
    except RecursionError:
        raise ValueError("malformed JSON: nesting too deep") from None
    return obj


def error_value(message: str, url: str) -> dict:
    return {"error": True, "message": message, "url": url}


def render_report(data, width: int = DEFAULT_WIDTH) -> dict:
    """Summary cards, table and chart for an already-parsed payload."""
    pairs = extract_top_numeric(data)
    table = build_table(data)
    chart = render_chart(pairs, width)
    return {
        "summary": [asdict(i) for i in summarize(data)],
        "table": asdict(table) if table else None,
        "pairs": [asdict(p) for p in pairs],
        "chart": asdict(chart) if chart else None,
    }


class ReportFetcher:
    def __init__(self, config: Config, session=None):
        self.config = config
        self.session = session or requests.Session()

    def url_for(self, suburb: str, slug: str) -> str:
        return build_url(self.config, suburb, slug)

    def get_json(self, url: str):
        # no auth headers, the proxy adds them
        r = self.session.get(url, headers={"Accept": "application/json"}, timeout=self.config.timeout)
        if not 200 <= r.status_code < 300:
            raise requests.HTTPError(f"HTTP {r.status_code}", response=r)
        return strict_json(r.text)

    def fetch(self, suburb: str, slug: str, width: int = DEFAULT_WIDTH) -> dict:
        url = self.url_for(suburb, slug)
        log.info("fetching %s", url)
        try:
            data = self.get_json(url)
        except (requests.RequestException, ValueError) as e:
            log.warning("fetch failed for %s: %s", url, e)
            return error_value(str(e), url)
        out = {"url": url, "data": data}
        out.update(render_report(data, width))
        log.info("rendered %s: %d summary items, %d chart rows",
                 url, len(out["summary"]), len(out["pairs"]))
        return out
