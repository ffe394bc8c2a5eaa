from __future__ import annotations

import math
import re
from typing import Optional

_INT_RE = re.compile(r"^\d+(?:\.0*)?$")


def normalize_label(value: str) -> str:
    """Trimmed, lowercased cell text used for label comparisons."""
    return value.strip().lower()


def parse_int(value: str) -> Optional[int]:
    """Parse a base-10 non-negative integer cell.

    Spreadsheet engines often hand integral numbers back as ``"20.0"``, so a
    zero-only fractional part is accepted. Any other fraction (``"20.5"``) or
    sign is a parse failure rather than being truncated; callers default
    failures to 0.
    """
    text = value.strip()
    if not _INT_RE.match(text):
        return None
    return int(text.split(".", 1)[0])


def parse_amount(value: str) -> Optional[float]:
    text = value.strip().replace(",", "")
    if not text:
        return None
    try:
        amount = float(text)
    except ValueError:
        return None
    if not math.isfinite(amount) or amount < 0:
        return None
    return amount
