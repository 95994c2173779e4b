from .font_size import WordFontSizeSettings, LinearFontSizeProvider
from .colors import (
    WordColorSettings,
    ConstColorProvider,
    ConstColorProviderFactory,
)
