# Flattener: any JSON value -> one-level {path: leaf} dict.
#
#   {"a": {"b": [1, {"c": 2}]}}  ->  {"a.b.__len": 2, "a.b[0]": 1, "a.b[1].c": 2}
#
# Objects join keys with ".", arrays index with "[i]" and record "__len".
# Depth is the number of "." in the path; at the limit a container is
# replaced by a one-line description. Only the first 8 array items expand.

from .formatting import js_string

DEPTH_LIMIT = 4
ARRAY_FANOUT = 8


def describe(v):
    """One-line stand-in for a value that is not expanded any further."""
    if isinstance(v, list):
        return f"Array({len(v)})"
    if isinstance(v, dict):
        return f"Object({len(v)} keys)"
    return js_string(v)


def flatten(value, depth_limit: int = DEPTH_LIMIT) -> dict:
    out = {}
    if value is None:
        return out
    # worklist of (value, path, depth); children are pushed in reverse so
    # pops follow document order and keys land in traversal order
    stack = [(value, "", 0)]
    while stack:
        v, path, depth = stack.pop()
        if not isinstance(v, (list, dict)):
            out[path or "value"] = v
            continue
        if depth >= depth_limit:
            out[path or "value"] = describe(v)
            continue
        if isinstance(v, list):
            out[f"{path}.__len" if path else "__len"] = len(v)
            children = [(f"{path}[{i}]", item) for i, item in enumerate(v[:ARRAY_FANOUT])]
        else:
            children = [(f"{path}.{k}" if path else k, item) for k, item in v.items()]
        for p, item in reversed(children):
            stack.append((item, p, p.count(".")))
    return out
