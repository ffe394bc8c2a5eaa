from __future__ import annotations

from datetime import date


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock it easily.
    """
    return date.today()


def current_year() -> int:
    return today_local().year
