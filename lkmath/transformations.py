"""Invertible transformations of objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Translation:
    """Moves objects by a fixed offset."""

    translation: Any

    def transform(self, obj: Any) -> Any:
        return obj + self.translation

    def inverse_transform(self, obj: Any) -> Any:
        return obj - self.translation