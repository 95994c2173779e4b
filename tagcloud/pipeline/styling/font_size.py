"""Font-size derivation from word frequency."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class WordFontSizeSettings:
    """Frequencies of all cloud words and the font-size range to map them to."""

    word_frequencies: dict[str, int] = field(default_factory=dict)
    min_frequency_font_size: float = 12.0
    max_frequency_font_size: float = 48.0


class LinearFontSizeProvider:
    """Linear min–max rescaling of frequency onto the font-size range.

    The least frequent word gets ``min_frequency_font_size``, the most
    frequent ``max_frequency_font_size``.  If every word is equally
    frequent, all of them get the maximum size.
    """

    def __init__(self, settings: WordFontSizeSettings) -> None:
        if not settings.word_frequencies:
            raise ValueError("Can't derive font sizes without word frequencies")
        self.settings = settings
        self._font_size_delta = (
            settings.max_frequency_font_size - settings.min_frequency_font_size
        )
        frequencies = settings.word_frequencies.values()
        self._min_frequency = min(frequencies)
        self._frequency_delta = max(frequencies) - self._min_frequency

    def get_font_size(self, word: str) -> float:
        if word not in self.settings.word_frequencies:
            raise KeyError(f"Can't generate font size for '{word}'")
        normalized = self._normalized_frequency(self.settings.word_frequencies[word])
        return self.settings.min_frequency_font_size + self._font_size_delta * normalized

    def _normalized_frequency(self, frequency: int) -> float:
        if self._frequency_delta == 0:
            return 1.0
        return (frequency - self._min_frequency) / self._frequency_delta
