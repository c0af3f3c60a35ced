"""Cast helpers for raw config values.

Raw values come back from the host store as strings (flags as ``"1"`` /
``"0"``), or ``None`` when nothing is configured.
"""

from __future__ import annotations

import re
from typing import Any

# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


def _to_text(value: Any) -> str:
    """Convert a raw config value to trimmed text.

    ``None`` and ``False`` become ``""``; ``True`` becomes ``"1"``.
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value).strip()


# ---------------------------------------------------------------------------
# Flag caster
# ---------------------------------------------------------------------------

_FALSY = frozenset({"0", ""})


def _cast_flag(value: Any) -> bool:
    """Cast a raw config value to ``bool``.

    Only ``""`` and ``"0"`` are false once trimmed; every other string,
    ``"false"`` included, counts as enabled. Never raises.
    """
    return _to_text(value) not in _FALSY


# ---------------------------------------------------------------------------
# Attribute codes
# ---------------------------------------------------------------------------

_NON_CODE_CHARS = re.compile(r"[^A-Za-z0-9_]+")


def strip_code(code: Any) -> str:
    """Strip the code of anything not normally in an attribute code.

    The filter runs before lowercasing, so non-ASCII letters are dropped
    rather than case-folded into ASCII.

    >>> strip_code("ABC-123_x")
    'abc123_x'
    >>> strip_code(None)
    ''
    """
    if code is None:
        code = ""
    return _NON_CODE_CHARS.sub("", str(code)).lower().strip()


def split_codes(value: Any, delimiter: str = ",") -> list[str]:
    """Split a delimited string and normalize every part.

    Empty parts are kept, so an unset value yields ``[""]``.

    >>> split_codes("Size, Material")
    ['size', 'material']
    """
    return [strip_code(part) for part in _to_text(value).split(delimiter)]
