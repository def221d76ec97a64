"""
Value normalization shared by the OFX and CSV dialects.

Every helper returns None (or raises ValueError where noted) instead of
guessing: a value that cannot be normalized must never reach ImportedTransaction.
"""

from __future__ import annotations

import math
import re
from datetime import date

from .models import TxType

_OFX_DATE_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})")
_BR_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

# R$, $ and whitespace (\s also covers the NBSP many bank exports use)
_CURRENCY_RE = re.compile(r"[R$\s]")
_DOT_DECIMAL_RE = re.compile(r"^[+-]?[0-9]*\.[0-9]{1,2}$")
_PLAIN_NUMBER_RE = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)$")


def _iso(year: int, month: int, day: int) -> str | None:
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None


def ofx_date_to_iso(raw: str | None) -> str | None:
    """YYYYMMDD[hhmmss[.xxx][tz]] -> YYYY-MM-DD."""
    m = _OFX_DATE_RE.match((raw or "").strip())
    if not m:
        return None
    return _iso(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def csv_date_to_iso(raw: str | None) -> str | None:
    """DD/MM/YYYY or YYYY-MM-DD (optionally followed by a time) -> YYYY-MM-DD."""
    s = (raw or "").strip()
    if not s:
        return None
    s = s.split()[0]

    m = _BR_DATE_RE.match(s)
    if m:
        return _iso(int(m.group(3)), int(m.group(2)), int(m.group(1)))

    m = _ISO_DATE_RE.match(s)
    if m:
        return _iso(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    return None


def parse_ofx_amount(raw: str) -> float:
    """
    Signed OFX amount; "," or "." as fractional separator.
    Raises ValueError for anything that is not a plain decimal number.
    """
    s = raw.strip().replace(",", ".", 1)
    if not _PLAIN_NUMBER_RE.match(s):
        raise ValueError(f"invalid amount: {raw!r}")
    return float(s)


def parse_br_amount(raw: str) -> float:
    """
    Brazilian formatted amount: "R$ -1.234,56" -> -1234.56.
    Returns NaN when the text is not numeric; callers skip those rows.
    """
    s = _CURRENCY_RE.sub("", raw)
    if "," in s or not _DOT_DECIMAL_RE.match(s):
        s = s.replace(".", "").replace(",", ".", 1)

    # float() alone would also take "1_000", "1e5" and "infinity"
    if not _PLAIN_NUMBER_RE.match(s):
        return math.nan
    return float(s)


def tx_type_for(signed_amount: float) -> TxType:
    return "income" if signed_amount >= 0 else "expense"
