from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .layouts.base import HeaderLayout
from .layouts.current_layout import CurrentLayout
from .layouts.legacy_layout import LegacyLayout


def _default_layouts() -> tuple[HeaderLayout, ...]:
    return (LegacyLayout(), CurrentLayout())


@dataclass
class HeaderLayoutFactory:
    """Factory Pattern: pick the header layout a row belongs to."""

    layouts: tuple[HeaderLayout, ...] = field(default_factory=_default_layouts)

    def for_row(self, labels: Sequence[str]) -> Optional[HeaderLayout]:
        for layout in self.layouts:
            if layout.matches(labels):
                return layout
        return None

    @property
    def name_labels(self) -> frozenset[str]:
        return frozenset(layout.name_label for layout in self.layouts)

    @property
    def roll_labels(self) -> frozenset[str]:
        return frozenset(layout.roll_label for layout in self.layouts)
