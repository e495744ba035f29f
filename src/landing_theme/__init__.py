"""Landing Theme.

Semantic color tokens for landing pages, derived from presets and custom
colors with WCAG AA contrast enforced.
"""

__version__ = "1.0.0"

from .config import EngineConfig, get_config, load_config, save_config
from .theme_engine import (
    ThemeEngine,
    ThemeOverrides,
    ThemeTokens,
    derive_theme_tokens,
    derive_tokens,
)

__all__ = [
    "__version__",
    "EngineConfig",
    "get_config",
    "load_config",
    "save_config",
    "ThemeEngine",
    "ThemeOverrides",
    "ThemeTokens",
    "derive_theme_tokens",
    "derive_tokens",
]
