# Runtime configuration and request URL building.
#
# PROXY_BASE   worker/proxy root, e.g. http://localhost:5000/proxy
# PATH_PREFIX  "suburb" (live, proxy adds the token) or "sandbox/suburb"
# USE_PROXY    1/0; without a proxy base the sandbox is called directly

import os
from dataclasses import dataclass, field
from urllib.parse import quote

API_ROOT = "https://www.microburbs.com.au/report_generator/api"
SANDBOX_BASE_DIRECT = f"{API_ROOT}/sandbox/suburb"
PATH_PREFIXES = ("suburb", "sandbox/suburb")

CUSTOM_SLUG = "__custom__"
DEFAULT_SLUG = "amenity"

ENDPOINT_OPTIONS = [
    {"label": "Amenities", "slug": "amenity"},
    {"label": "Demographics", "slug": "demographics"},
    {"label": "Ethnicity by Pocket", "slug": "ethnicity"},
    {"label": "Market Insights", "slug": "market-insights"},
    {"label": "Market Insights by Pocket", "slug": "market-insights-by-pocket"},
    {"label": "Market Insights by Street", "slug": "market-insights-by-street"},
    {"label": "Risk Factors", "slug": "risk-factors"},
    {"label": "School Catchments", "slug": "school-catchments"},
    {"label": "Schools", "slug": "schools"},
    {"label": "Similar Suburbs", "slug": "similar-suburbs"},
    {"label": "Suburb Information", "slug": "suburb-information"},
    {"label": "Summary", "slug": "summary"},
    {"label": "Zoning", "slug": "zoning"},
    {"label": "Custom… (type your own)", "slug": CUSTOM_SLUG},
]

_TRUE = {"1", "true", "yes", "on"}
# left as-is by encodeURIComponent on top of quote()'s own set
_UNRESERVED = "!*'()"


@dataclass(frozen=True)
class Config:
    proxy_base: str = ""
    path_prefix: str = "suburb"
    use_proxy: bool = True
    api_key: str = field(default="", repr=False)
    timeout: float = 15

    def __post_init__(self):
        if self.path_prefix not in PATH_PREFIXES:
            raise ValueError(f"path_prefix must be one of {PATH_PREFIXES}, got {self.path_prefix!r}")
        object.__setattr__(self, "proxy_base", self.proxy_base.rstrip("/"))

    @classmethod
    def from_env(cls, env=None):
        env = os.environ if env is None else env
        return cls(
            proxy_base=env.get("PROXY_BASE", ""),
            path_prefix=env.get("PATH_PREFIX", "suburb"),
            use_proxy=env.get("USE_PROXY", "1").strip().lower() in _TRUE,
            api_key=env.get("MICROBURBS_API_KEY", ""),
            timeout=float(env.get("REQUEST_TIMEOUT", "15")),
        )

    def public(self) -> dict:
        # safe to hand to the page: no key
        return {"proxyBase": self.proxy_base, "pathPrefix": self.path_prefix, "useProxy": self.use_proxy}


def resolve_slug(selected: str, custom: str = "") -> str:
    if selected == CUSTOM_SLUG:
        return (custom or "").strip() or DEFAULT_SLUG
    return selected or DEFAULT_SLUG


def build_url(config: Config, suburb: str, slug: str) -> str:
    s, q = quote(slug, safe=_UNRESERVED), quote((suburb or "").strip(), safe=_UNRESERVED)
    if config.use_proxy and config.proxy_base:
        return f"{config.proxy_base}/{config.path_prefix}/{s}?suburb={q}"
    return f"{SANDBOX_BASE_DIRECT}/{s}?suburb={q}"


def curl_command(url: str) -> str:
    return " ".join(["curl", "-s", f'"{url}"'])
