from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...core.enums import HeaderLayoutKind


class HeaderLayout(ABC):
    """Strategy Pattern: one recognised header row format."""

    @property
    @abstractmethod
    def kind(self) -> HeaderLayoutKind:
        raise NotImplementedError

    @property
    @abstractmethod
    def name_label(self) -> str:
        raise NotImplementedError

    @property
    @abstractmethod
    def roll_label(self) -> str:
        raise NotImplementedError

    def matches(self, labels: Sequence[str]) -> bool:
        """``labels`` are the row's cells, already trimmed and lowercased."""
        return self.name_label in labels and self.roll_label in labels
