"""Layout input/output dataclasses, result type, and configuration constants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from tagcloud.geometry import Rectangle, Size


T = TypeVar("T")


# ── Input / output dataclasses ─────────────────────────────────────


@dataclass(frozen=True)
class WordEntry:
    """A word waiting to be placed, with its pre-measured pixel size."""

    word: str
    size: Size


@dataclass(frozen=True)
class WordRectangle:
    """A word with its resolved rectangle."""

    word: str
    rectangle: Rectangle


# ── Errors ─────────────────────────────────────────────────────────


class LayoutError(Exception):
    """Base class for every layout failure kind."""

    kind = "LayoutError"

    def __init__(self, word: str, reason: str) -> None:
        self.word = word
        self.reason = reason
        super().__init__(f"{self.kind} for '{word}': {reason}")


class EmptySizeError(LayoutError):
    """Raised when a word's size has zero width or height."""

    kind = "EmptySize"

    def __init__(self, word: str, size: Size) -> None:
        self.size = size
        super().__init__(
            word, f"size {size.width}×{size.height} must be strictly positive",
        )


class DuplicateWordError(LayoutError):
    """Raised when a word is already pending in the builder."""

    kind = "DuplicateWord"

    def __init__(self, word: str) -> None:
        super().__init__(word, "word has already been added to the builder")


class PlacementFailedError(LayoutError):
    """Raised when no candidate position yields a non-overlapping rectangle."""

    kind = "PlacementFailed"

    def __init__(self, word: str, candidates: int) -> None:
        self.candidates = candidates
        super().__init__(
            word,
            f"all {candidates} candidate positions overlap placed words; "
            f"the cloud is too dense",
        )


class LayoutTimeoutError(LayoutError):
    """Raised when a build runs past its time budget."""

    kind = "LayoutTimeout"

    def __init__(self, word: str, budget_s: float) -> None:
        self.budget_s = budget_s
        super().__init__(word, f"build exceeded its {budget_s:g}s budget")


# ── Result ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class LayoutResult(Generic[T]):
    """Either a success carrying *value* or a failure carrying *error*."""

    value: T | None = None
    error: LayoutError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> LayoutResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: LayoutError) -> LayoutResult[T]:
        return cls(error=error)

    def unwrap(self) -> T | None:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value


# ── Configuration ──────────────────────────────────────────────────

from tagcloud.config import LAYOUT_RULES

# Derived from the shared LayoutRules (tagcloud.config).
PENALTY_WEIGHT = LAYOUT_RULES.penalty_weight
ANCHORS_PER_RECTANGLE = 8    # 4 corners + 4 edge midpoints
