"""CSS output for theme tokens."""

from typing import Callable, Optional

from .schema import TOKEN_NAMES, ThemeOverrides, ThemeTokens
from .utils import hex_to_hsl, normalize_hex


def css_variable_name(token_name: str) -> str:
    """Map a token name to its custom property name (card_foreground -> --card-foreground)."""
    return f"--{token_name.replace('_', '-')}"


def _render(tokens: ThemeTokens, format_value: Callable[[str], str]) -> str:
    values = tokens.model_dump()
    return "\n".join(
        f"{css_variable_name(name)}: {format_value(values[name])};" for name in TOKEN_NAMES
    )


def tokens_to_css(tokens: ThemeTokens) -> str:
    """Render tokens as one ``--name: #rrggbb;`` declaration per line."""
    return _render(tokens, lambda value: value)


def hex_to_hsl_triple(hex_color: str) -> str:
    """Format a hex color as a space separated ``h s% l%`` triple."""
    hsl = hex_to_hsl(hex_color)
    return f"{hsl.h} {hsl.s}% {hsl.l}%"


def tokens_to_hsl_css(tokens: ThemeTokens) -> str:
    """Render tokens with HSL triple values for ``hsl(var(--name))`` stylesheets."""
    return _render(tokens, hex_to_hsl_triple)


def theme_class_name(theme_id: str, overrides: Optional[ThemeOverrides],
                     background: str, prefix: str = "site-theme") -> str:
    """Build a class name unique to a preset, its custom colors and mode.

    Args:
        theme_id: Preset id
        overrides: Custom colors applied to the preset
        background: Effective background color, which decides the mode suffix
        prefix: Class name prefix

    Returns:
        Class name such as ``site-theme-noir-3b82f6-dark``
    """
    parts = [prefix, theme_id]
    if overrides is not None:
        for color in (overrides.primary, overrides.accent, overrides.background,
                      overrides.brand):
            if color:
                parts.append(normalize_hex(color)[1:])

    parts.append("dark" if hex_to_hsl(background).l < 50 else "light")
    return "-".join(parts)


def scoped_style_block(class_name: str, css: str, indent: str = "  ") -> str:
    """Wrap declarations in a rule scoped to ``class_name``."""
    body = "\n".join(f"{indent}{line}" for line in css.splitlines())
    return f".{class_name} {{\n{body}\n}}"
