from __future__ import annotations

from enum import Enum


class HeaderLayoutKind(str, Enum):
    """Header row formats seen in mess attendance sheets."""

    LEGACY = "legacy"
    CURRENT = "current"


class SheetColumn(str, Enum):
    """Columns the row normalizer needs, in the order they are resolved."""

    NAME = "name"
    ROLL = "roll"
    PRESENT = "present"
    ABSENT = "absent"
    TOTAL_AMOUNT = "total-amount"
