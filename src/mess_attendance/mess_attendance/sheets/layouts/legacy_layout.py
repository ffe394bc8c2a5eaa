from __future__ import annotations

from ...core.enums import HeaderLayoutKind
from .base import HeaderLayout


class LegacyLayout(HeaderLayout):
    """Older sheets: "Student Name" / "Roll No."."""

    kind = HeaderLayoutKind.LEGACY
    name_label = "student name"
    roll_label = "roll no."
