"""Word colour providers."""

from __future__ import annotations

from dataclasses import dataclass

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class WordColorSettings:
    color: RGB = (0, 0, 0)

    def __post_init__(self) -> None:
        if len(self.color) != 3 or not all(
            isinstance(c, int) and 0 <= c <= 255 for c in self.color
        ):
            raise ValueError(f"Invalid RGB colour {self.color!r}")


class ConstColorProvider:
    """Paints every word in the same colour."""

    def __init__(self, color: RGB = (0, 0, 0)) -> None:
        self.color = color

    def get_color(self, word: str) -> RGB:
        return self.color


class ConstColorProviderFactory:
    def create_default(self, settings: WordColorSettings) -> ConstColorProvider:
        return ConstColorProvider(settings.color)
