from __future__ import annotations

from ...core.enums import HeaderLayoutKind
from .base import HeaderLayout


class CurrentLayout(HeaderLayout):
    """Current sheets: "Name" / "Enrollment No"."""

    kind = HeaderLayoutKind.CURRENT
    name_label = "name"
    roll_label = "enrollment no"
