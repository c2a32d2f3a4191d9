"""Output encoders for command results.

Three encodings are supported:

``toon``
    Compact, tab-delimited notation meant to be read by language models.
    A tab is usually a single token, so it is used between sibling fields
    instead of a comma.  Runs of scalar fields share one line, uniform lists
    of flat objects become a header plus one row per element, everything
    else nests with two spaces per level.

``json``
    Pretty-printed JSON with two-space indentation, for scripting.

``plain``
    ``key: value`` lines for humans.

All encoders are pure functions of their input and never modify it.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, Callable, Dict, List

from .errors import InvalidInput

OUTPUT_FORMATS = ("toon", "json", "plain")
DEFAULT_FORMAT = "toon"

INDENT = "  "
DELIMITER = "\t"

_BARE_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")
_NUMERIC = re.compile(r"^-?(?:\d+)(?:\.\d+)?(?:[eE][+-]?\d+)?$")
_SPECIAL = set(':"\\[]{}\t\n\r')


def _is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


# --- toon -----------------------------------------------------------------

def _toon_scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return "null"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return _toon_string(str(value))


def _toon_string(s: str) -> str:
    if (
        not s
        or s != s.strip()
        or s in ("true", "false", "null")
        or _NUMERIC.match(s)
        or s.startswith("-")
        or any(ch in _SPECIAL or ord(ch) < 0x20 for ch in s)
    ):
        return json.dumps(s, ensure_ascii=False)
    return s


def _toon_key(key: Any) -> str:
    key = str(key)
    return key if _BARE_KEY.match(key) else json.dumps(key, ensure_ascii=False)


def _tabular_fields(items: List[Any]) -> List[str] | None:
    """Return the shared keys if *items* can be written as a table."""
    if not items or not all(isinstance(it, dict) and it for it in items):
        return None
    fields = list(items[0].keys())
    for it in items:
        if list(it.keys()) != fields or not all(_is_scalar(v) for v in it.values()):
            return None
    return fields


def _toon_array(label: str, items: List[Any], level: int) -> List[str]:
    pad = INDENT * level
    header = f"{label}[{len(items)}]"
    if not items:
        return [f"{pad}{header}:"]
    if all(_is_scalar(it) for it in items):
        return [f"{pad}{header}: " + DELIMITER.join(_toon_scalar(it) for it in items)]

    fields = _tabular_fields(items)
    if fields is not None:
        lines = [f"{pad}{header}{{" + DELIMITER.join(_toon_key(f) for f in fields) + "}:"]
        row_pad = INDENT * (level + 1)
        for it in items:
            lines.append(row_pad + DELIMITER.join(_toon_scalar(it[f]) for f in fields))
        return lines

    lines = [f"{pad}{header}:"]
    for it in items:
        lines.extend(_toon_list_item(it, level + 1))
    return lines


def _toon_list_item(item: Any, level: int) -> List[str]:
    pad = INDENT * level
    if _is_scalar(item):
        return [f"{pad}- {_toon_scalar(item)}"]
    if isinstance(item, list):
        nested = _toon_array("", item, level + 1)
        return [f"{pad}- {nested[0].lstrip()}"] + nested[1:]
    if not item:
        return [f"{pad}-"]
    # The body sits one level below the dash, so its first line lines up
    # with the text after "- ".
    body = _toon_mapping(item, level + 1)
    return [f"{pad}- {body[0].lstrip()}"] + body[1:]


def _toon_mapping(data: Dict[str, Any], level: int) -> List[str]:
    pad = INDENT * level
    lines: List[str] = []
    run: List[str] = []

    def flush() -> None:
        if run:
            lines.append(pad + DELIMITER.join(run))
            run.clear()

    for key, value in data.items():
        k = _toon_key(key)
        if _is_scalar(value):
            run.append(f"{k}: {_toon_scalar(value)}")
            continue
        flush()
        if isinstance(value, dict):
            if value:
                lines.append(f"{pad}{k}:")
                lines.extend(_toon_mapping(value, level + 1))
            else:
                lines.append(f"{pad}{k}: {{}}")
        elif isinstance(value, (list, tuple)):
            lines.extend(_toon_array(k, list(value), level))
        else:
            run.append(f"{k}: {_toon_scalar(value)}")
    flush()
    return lines


def encode_toon(data: Any) -> str:
    """Encode *data* in the compact tab-delimited format."""
    if isinstance(data, dict):
        return "\n".join(_toon_mapping(data, 0)) if data else "{}"
    if isinstance(data, (list, tuple)):
        return "\n".join(_toon_array("", list(data), 0))
    return _toon_scalar(data)


# --- json -----------------------------------------------------------------

def encode_json(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


# --- plain ----------------------------------------------------------------

def _plain_scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _plain_lines(data: Any, level: int) -> List[str]:
    pad = INDENT * level
    if isinstance(data, dict):
        if not data:
            return [f"{pad}{{}}"]
        lines: List[str] = []
        for key, value in data.items():
            if isinstance(value, dict) and value:
                lines.append(f"{pad}{key}:")
                lines.extend(_plain_lines(value, level + 1))
            elif isinstance(value, (list, tuple)) and value:
                lines.append(f"{pad}{key}:")
                lines.extend(_plain_items(value, level))
            elif isinstance(value, dict):
                lines.append(f"{pad}{key}: {{}}")
            elif isinstance(value, (list, tuple)):
                lines.append(f"{pad}{key}: []")
            else:
                lines.append(f"{pad}{key}: {_plain_scalar(value)}")
        return lines
    if isinstance(data, (list, tuple)):
        if not data:
            return [f"{pad}[]"]
        lines = []
        for item in data:
            lines.extend(_plain_lines(item, level))
        return lines
    return [f"{pad}{_plain_scalar(data)}"]


def _plain_items(items: Any, level: int) -> List[str]:
    """Elements of a keyed list: scalars stay at the key's level, mappings go one deeper."""
    lines: List[str] = []
    for item in items:
        if isinstance(item, dict) and item:
            lines.extend(_plain_lines(item, level + 1))
        elif isinstance(item, (list, tuple)) and item:
            lines.extend(_plain_items(item, level))
        else:
            lines.extend(_plain_lines(item, level))
    return lines


def encode_plain(data: Any) -> str:
    """Encode *data* as indented ``key: value`` lines."""
    return "\n".join(_plain_lines(data, 0))


# --- selection ------------------------------------------------------------

_ENCODERS: Dict[str, Callable[[Any], str]] = {
    "toon": encode_toon,
    "json": encode_json,
    "plain": encode_plain,
}


def get_encoder(name: str) -> Callable[[Any], str]:
    try:
        return _ENCODERS[name]
    except KeyError:
        raise InvalidInput(
            f"Unknown output format: {name}",
            hint="Use one of: " + ", ".join(OUTPUT_FORMATS),
        ) from None


def format_output(data: Any, fmt: str = DEFAULT_FORMAT) -> str:
    return get_encoder(fmt)(data)
