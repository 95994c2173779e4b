"""Layout — positions all words of a tag cloud around a center point.

Submodules:
  models        Input/output dataclasses, LayoutResult, error kinds.
  penalty       Distance objective and keep-out penalty functions.
  candidates    Ordered, deduplicated search start points.
  minimizer     Pluggable local minimizer (scipy Nelder–Mead by default).
  engine        Main placement algorithm (penalty-guided search with hard overlap checks).
  serialization JSON conversion (layout_to_dict, parse_layout).
"""

from .models import (
    WordEntry, WordRectangle, LayoutResult, LayoutError,
    EmptySizeError, DuplicateWordError, PlacementFailedError, LayoutTimeoutError,
)
from .engine import CircularLayoutBuilder
from .minimizer import Minimizer, NelderMeadMinimizer
from .serialization import layout_to_dict, parse_layout

__all__ = [
    # Models
    "WordEntry", "WordRectangle", "LayoutResult", "LayoutError",
    "EmptySizeError", "DuplicateWordError", "PlacementFailedError",
    "LayoutTimeoutError",
    # Engine
    "CircularLayoutBuilder",
    # Minimizer
    "Minimizer", "NelderMeadMinimizer",
    # Serialization
    "layout_to_dict", "parse_layout",
]
