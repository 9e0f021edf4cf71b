"""Numeric decoding of environment values with explicit byte-order control.

Values are parsed into fixed-width numpy scalars so that byte reversal has a
well-defined width. Parsing is locale-independent and must consume the whole
(trimmed) text; anything else yields ``None``.

Byte order:
  - ``"native"``: the parsed value as-is
  - ``"little"`` / ``"big"``: as-is when the host already uses that order,
    otherwise the same bit pattern with its bytes reversed

Note that the byte-order variants reinterpret the in-memory representation of
a value that came from decimal text. ``get_big_endian("PORT", np.uint16)`` on
a little-endian host turns 8080 into 36895. Callers use them when they need
the value laid out for a specific wire order.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Optional

import numpy as np

from .utils.strings import strip_whitespace

BYTE_ORDERS = ("native", "little", "big")

_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(
    r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|-?(?:inf|infinity|nan)",
    re.IGNORECASE,
)

# Python builtins have no fixed width; pin them explicitly so results do not
# depend on the platform's C long.
_BUILTIN_DTYPES = {
    int: np.dtype(np.int64),
    float: np.dtype(np.float64),
}


def host_byte_order() -> str:
    """Return ``"little"`` or ``"big"`` for the running interpreter."""
    return sys.byteorder


def resolve_dtype(dtype: Any) -> np.dtype:
    """Normalize *dtype* to a supported numpy integer or floating dtype.

    Raises:
        TypeError: For bool, complex, string, object and other non-arithmetic types.
    """
    if dtype is bool or dtype is np.bool_:
        raise TypeError("bool is not a supported numeric type")
    if dtype is int or dtype is float:
        return _BUILTIN_DTYPES[dtype]
    resolved = np.dtype(dtype)
    if resolved.kind not in "iuf":
        raise TypeError(f"Unsupported numeric type: {dtype!r}")
    return resolved


def _parse_int(text: str, dtype: np.dtype) -> Optional[np.generic]:
    if not _INT_RE.fullmatch(text):
        return None
    if dtype.kind == "u" and text.startswith("-"):
        return None
    value = int(text)
    info = np.iinfo(dtype)
    if value < info.min or value > info.max:
        return None
    return dtype.type(value)


def _parse_float(text: str, dtype: np.dtype) -> Optional[np.generic]:
    if not _FLOAT_RE.fullmatch(text):
        return None
    with np.errstate(over="ignore"):
        value = dtype.type(text)
    if np.isinf(value) and "inf" not in text.lower():
        # finite literal too large for the type
        return None
    return value


def parse_number(text: Optional[str], dtype: Any) -> Optional[np.generic]:
    """Parse *text* as *dtype*.

    Args:
        text: Textual value (surrounding whitespace is ignored).
        dtype: numpy integer/floating type, or builtin ``int`` / ``float``.

    Returns:
        A numpy scalar of the requested type, or None if *text* is None or
        does not parse completely.

    Raises:
        TypeError: If *dtype* is not a supported numeric type.
    """
    resolved = resolve_dtype(dtype)
    if text is None:
        return None
    text = strip_whitespace(text)
    if not text:
        return None
    if resolved.kind == "f":
        return _parse_float(text, resolved)
    return _parse_int(text, resolved)


def to_byte_order(value: np.generic, order: str = "native") -> np.generic:
    """Return *value* laid out in the requested byte order.

    Raises:
        ValueError: If *order* is not one of ``native``, ``little``, ``big``.
    """
    if order not in BYTE_ORDERS:
        raise ValueError(f"Unknown byte order: {order}. Supported: {', '.join(BYTE_ORDERS)}")
    if order == "native" or order == host_byte_order():
        return value
    return value.byteswap()


def decode(text: Optional[str], dtype: Any, order: str = "native") -> Optional[np.generic]:
    """Parse *text* as *dtype* and apply *order*; None if it does not parse."""
    value = parse_number(text, dtype)
    if value is None:
        return None
    return to_byte_order(value, order)
