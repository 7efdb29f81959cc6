"""Query string helpers shared by pagination strategies."""

import re
import sys
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

# ECMAScript StrWhiteSpaceChar: tab, line terminators, VT, FF, BOM and the
# Unicode space separators. Narrower than Python's ``\s``.
_JS_WHITESPACE = (
    r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Leading whitespace, optional sign, then an ASCII digit run. Anything after
# the digits is ignored, matching JavaScript's parseInt(value, 10).
_LEADING_INTEGER = re.compile(rf"^[{_JS_WHITESPACE}]*([+-]?)0*([0-9]+)")

# Magnitudes above this saturate instead of being converted exactly.
MAX_PARSED_INT = sys.maxsize
_MAX_PARSED_DIGITS = len(str(MAX_PARSED_INT))


def parse_leading_int(value: Any) -> int | None:
    """Leniently parse the leading base-10 integer of a raw query value.

    Returns ``None`` when no integer prefix is present. Repeated query keys
    arrive as lists; only the first value is considered. Magnitudes beyond
    ``MAX_PARSED_INT`` saturate to ``±MAX_PARSED_INT``.

    Examples:
        "25"      → 25
        "  12abc" → 12
        "-5"      → -5
        "3.9"     → 3
        "abc"     → None
        ""        → None
    """
    if value is None:
        return None

    if isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]

    text = value if isinstance(value, str) else str(value)
    match = _LEADING_INTEGER.match(text)
    if match is None:
        return None

    sign, digits = match.groups()
    if len(digits) > _MAX_PARSED_DIGITS:
        magnitude = MAX_PARSED_INT
    else:
        magnitude = min(int(digits), MAX_PARSED_INT)

    return -magnitude if sign == "-" else magnitude


def encode_query(params: Mapping[str, Any]) -> str:
    """Form-url-encode ``params`` preserving key order."""
    return urlencode(params)
