"""Shared utilities for cleaning legacy POS spreadsheet cells.

This module provides the small conversions every export parser relies on:

- Text normalization: trim cells, map empty text to an explicit absence
- Number parsing: locale-agnostic handling of thousands/decimal separators
- Date parsing: ``dd/mm/yyyy`` and ``dd-mm-yyyy`` to ISO text
- Key naming: snake_case attribute names to camelCase JSON keys

Examples:
    >>> from pos_seed.parsing.cleaning_utils import to_float, parse_dmy_date
    >>> to_float("1,384.92")
    1384.92
    >>> to_float("1.384,92")
    1384.92
    >>> parse_dmy_date("10/01/2026")
    '2026-01-10'
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

import numpy as np
import pandas as pd

# Digit groups of exactly three after 1-3 leading digits, no fractional part
_GROUPED_COMMA_RE = re.compile(r"[0-9]{1,3}(?:,[0-9]{3})+")
_GROUPED_DOT_RE = re.compile(r"[0-9]{1,3}(?:\.[0-9]{3})+")

# Anything the float() constructor accepts but a plain decimal literal does not
_NON_DECIMAL_RE = re.compile(r"[_a-zA-Z]")
_EXPONENT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)[eE][+-]?[0-9]+")
# Unsigned hex, binary and octal integer literals (0x1A, 0b101, 0o7)
_PREFIXED_INT_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[bB][01]+|[oO][0-7]+)")

_DMY_RE = re.compile(r"([0-9]{1,2})[/-]([0-9]{1,2})[/-]([0-9]{4})")


def _is_missing(x: Any) -> bool:
    if x is None:
        return True
    if isinstance(x, float) and math.isnan(x):
        return True
    return x is pd.NaT


def to_text(x: Any) -> str:
    """Convert a cell value to trimmed text.

    Args:
        x: Cell value (string, number, or None/NaN).

    Returns:
        Trimmed string, or ``""`` for None/NaN.

    Examples:
        >>> to_text("  PCS ")
        'PCS'
        >>> to_text(None)
        ''
    """
    if _is_missing(x):
        return ""
    return str(x).strip()


def text_or_none(x: Any) -> Optional[str]:
    """Trim a cell value, returning None when nothing is left."""
    s = to_text(x)
    return s or None


def to_float(x: Any) -> Optional[float]:
    """Parse a number whose separator convention is unknown.

    Handles the two conventions found in the legacy exports without any
    locale configuration:

    - Both ``,`` and ``.`` present: the separator that appears last is the
      decimal point, the other one is a thousands separator.
    - Only ``,``: thousands separator when the value is strictly grouped in
      threes (``1,234``, ``12,345,678``), otherwise the decimal point.
    - Only ``.``: thousands separator when strictly grouped in threes
      (``1.234``), otherwise the decimal point.

    Unsigned ``0x``/``0b``/``0o`` integer literals are accepted as well.
    Malformed input never raises.

    Args:
        x: Value to parse (string, number, or None).

    Returns:
        Finite float value, or None when the value is empty or unparsable.

    Examples:
        >>> to_float("107,000.00")
        107000.0
        >>> to_float("12,5")
        12.5
        >>> to_float("1.234")
        1234.0
        >>> to_float("") is None
        True
    """
    if x is None:
        return None
    if isinstance(x, (int, float, np.integer, np.floating)) and not isinstance(x, (bool, np.bool_)):
        v = float(x)
        return v if math.isfinite(v) else None

    s = str(x).strip()
    if not s:
        return None

    s = re.sub(r"\s+", "", s)

    has_com = "," in s
    has_dot = "." in s

    if has_com and has_dot:
        if s.rfind(".") > s.rfind(","):
            # 107,000.00
            s = s.replace(",", "")
        else:
            # 1.384,92
            s = s.replace(".", "").replace(",", ".")
    elif has_com:
        if _GROUPED_COMMA_RE.fullmatch(s):
            s = s.replace(",", "")
        else:
            s = s.replace(",", ".")
    elif has_dot:
        if _GROUPED_DOT_RE.fullmatch(s):
            s = s.replace(".", "")

    if _PREFIXED_INT_RE.fullmatch(s):
        try:
            return float(int(s, 0))
        except OverflowError:
            return None
    if _NON_DECIMAL_RE.search(s) and not _EXPONENT_RE.fullmatch(s):
        return None
    try:
        v = float(s)
    except ValueError:
        return None
    return v if math.isfinite(v) else None


def to_int(x: Any) -> Optional[int]:
    """Parse a number with to_float and truncate it toward zero.

    Examples:
        >>> to_int("3")
        3
        >>> to_int("2,9")
        2
    """
    f = to_float(x)
    if f is None:
        return None
    return math.trunc(f)


def parse_dmy_date(x: Any) -> Optional[str]:
    """Parse ``dd/mm/yyyy`` or ``dd-mm-yyyy`` text into ISO ``yyyy-mm-dd``.

    Only day (1-31) and month (1-12) ranges are checked; days per month
    are not, so ``31/02/2026`` is accepted.

    Args:
        x: Cell value.

    Returns:
        ISO date text or None when the value does not match.

    Examples:
        >>> parse_dmy_date("5-1-2026")
        '2026-01-05'
        >>> parse_dmy_date("2026-01-05") is None
        True
    """
    s = to_text(x)
    if not s:
        return None
    m = _DMY_RE.fullmatch(s)
    if not m:
        return None
    dd, mm, yyyy = int(m.group(1)), int(m.group(2)), int(m.group(3))
    if dd < 1 or dd > 31 or mm < 1 or mm > 12:
        return None
    return f"{yyyy:04d}-{mm:02d}-{dd:02d}"


def to_camel(s: str) -> str:
    """Convert a snake_case name to camelCase.

    Examples:
        >>> to_camel("harga_jual_ecer1")
        'hargaJualEcer1'
    """
    head, *rest = s.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)
