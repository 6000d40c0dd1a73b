from __future__ import annotations

import math
import re
from typing import Any, Mapping, Sequence

_MISSING = object()
_NUMERIC_RE = re.compile(r"^\s*[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")


def lookup_path(raw: Mapping[str, Any], path: str) -> Any:
    current: Any = raw
    for key in path.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return _MISSING
        current = current[key]
    if current is None:
        return _MISSING
    return current


def first_present(raw: Mapping[str, Any], candidates: Sequence[str]) -> Any:
    """Return the value of the first candidate path that is present and not null."""
    for path in candidates:
        value = lookup_path(raw, path)
        if value is not _MISSING:
            return value
    return None


def coerce_number(value: Any) -> float:
    # bool is an int subclass; a flag is not a score.
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _NUMERIC_RE.match(value)
        if not match:
            return 0.0
        number = float(match.group(0))
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and math.isfinite(float(value))


def coerce_text(value: Any) -> str:
    if value is None or isinstance(value, (Mapping, list, tuple)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def coerce_text_list(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    items: list[str] = []
    for item in value:
        if item is None or isinstance(item, (Mapping, list)):
            continue
        items.append(coerce_text(item))
    return tuple(items)


def coerce_mapping(value: Any) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        return {}
    return {str(key): item for key, item in value.items()}


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
