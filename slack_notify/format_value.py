"""
Render arbitrary values as attachment field text.

Nested dicts (build results, deployment records, API responses) are reduced
to a display name where one is obvious, otherwise to compact JSON.

Display-name lookup order:
  name > title > id > key > url
"""

import json
from typing import Any

DISPLAY_KEYS = (
    "name",
    "display_name",
    "title",
    "id",
    "key",
    "html_url",
    "url",
)

# Slack truncates field values around this length.
MAX_FIELD_LEN = 2000


def _truncate(text: str, max_len: int) -> str:
    return f"{text[:max_len]}..." if len(text) > max_len else text


def format_value(val: Any, max_len: int = MAX_FIELD_LEN) -> str:
    """
    Format a value for a field.

    - ``None`` becomes ``""``; bools become ``yes``/``no``.
    - Lists of scalars are joined with ", ".
    - Dicts use the first display key found, else compact JSON.
    """
    if val is None:
        return ""

    if isinstance(val, bool):
        return "yes" if val else "no"

    if not isinstance(val, (dict, list, tuple)):
        return _truncate(str(val), max_len)

    if isinstance(val, (list, tuple)):
        if not val:
            return "(none)"
        items = [format_value(v, 80) for v in val]
        return _truncate(", ".join(items), max_len)

    for key in DISPLAY_KEYS:
        found = val.get(key)
        if found is not None and not isinstance(found, (dict, list)):
            return _truncate(str(found), max_len)

    try:
        dumped = json.dumps(val, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        return "[unrenderable value]"
    return _truncate(dumped, max_len)
