"""Theme CLI commands.

This module provides CLI commands for inspecting presets, deriving token sets
from custom colors, and checking color pairs against WCAG AA.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..theme_engine import (
    SiteThemeConfig,
    ThemeEngine,
    ThemeEngineError,
    ThemeOverrides,
    check_text_contrast,
)


def _get_engine(ctx: click.Context) -> ThemeEngine:
    config = (ctx.obj or {}).get('config')
    return ThemeEngine.from_config(config) if config is not None else ThemeEngine()


def _fail(console: Console, message: str) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]")
    sys.exit(1)


def _load_site_theme(path: Path) -> SiteThemeConfig:
    """Load the theme section of a site config file (YAML or JSON)."""
    text = path.read_text(encoding='utf-8')
    if path.suffix.lower() == '.json':
        data = json.loads(text)
    else:
        data = yaml.safe_load(text) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}")
    theme_data: Dict[str, Any] = data.get('theme', data)
    return SiteThemeConfig(**theme_data)


@click.group()
def theme():
    """Inspect presets and derive accessible theme tokens."""
    pass


@theme.command(name="list")
@click.pass_context
def list_themes(ctx):
    """List all available theme presets."""
    console = Console()
    engine = _get_engine(ctx)

    table = Table(title="Theme Presets", show_header=True, header_style="bold")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Mode", style="magenta")
    table.add_column("Brand", style="blue")
    table.add_column("Description")

    for info in engine.list_themes():
        name_style = "cyan bold" if info['id'] == engine.default_theme else "cyan"
        table.add_row(
            f"[{name_style}]{info['id']}[/{name_style}]",
            info['name'],
            info['mode'],
            info['default_brand_hex'] or "-",
            info['description'],
        )

    console.print(table)


@theme.command()
@click.argument('theme_id')
@click.pass_context
def info(ctx, theme_id: str):
    """Show tokens and contrast ratios of a preset."""
    console = Console()
    engine = _get_engine(ctx)

    try:
        theme_info = engine.get_theme_info(theme_id)
    except ThemeEngineError as e:
        _fail(console, f"Error: {e}")

    console.print(f"\n[bold]{theme_info['name']}[/bold] ({theme_info['id']}, {theme_info['mode']})")
    if theme_info['description']:
        console.print(theme_info['description'])

    table = Table(show_header=True, header_style="bold")
    table.add_column("Token", style="cyan")
    table.add_column("Value")
    table.add_column("Contrast", justify="right")

    for name, value in theme_info['tokens'].items():
        ratio = theme_info['contrast'].get(name)
        table.add_row(name, f"[on {value}]  [/] {value}", f"{ratio:.2f}:1" if ratio else "")

    console.print(table)

    issues = engine.validate_theme(theme_id)
    for issue in issues:
        console.print(f"[yellow]• {issue}[/yellow]")


@theme.command()
@click.argument('theme_id', required=False)
@click.option('--background', help='Custom background color')
@click.option('--primary', help='Custom primary color')
@click.option('--accent', help='Custom accent color')
@click.option('--brand', help='Legacy brand color (ignored with --primary/--accent)')
@click.option('--config', 'site_config', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Site config file (YAML or JSON) with a theme section')
@click.option('--format', 'css_format', type=click.Choice(['hex', 'hsl']), default=None,
              help='CSS value format')
@click.option('--scoped', is_flag=True, help='Wrap declarations in a theme class rule')
@click.pass_context
def derive(ctx, theme_id: Optional[str], background: Optional[str], primary: Optional[str],
           accent: Optional[str], brand: Optional[str], site_config: Optional[Path],
           css_format: Optional[str], scoped: bool):
    """Derive theme tokens and print them as CSS custom properties."""
    console = Console(stderr=True)
    engine = _get_engine(ctx)

    try:
        colors = {}
        if site_config:
            record = _load_site_theme(site_config)
            theme_id = theme_id or record.theme_id.value
            colors = record.to_overrides().model_dump(exclude_none=True)

        cli_colors = {'background': background, 'primary': primary, 'accent': accent, 'brand': brand}
        colors.update({key: value for key, value in cli_colors.items() if value is not None})

        css = engine.get_css(theme_id, ThemeOverrides(**colors), css_format=css_format, scoped=scoped)
    except (ThemeEngineError, ValueError, OSError, yaml.YAMLError) as e:
        _fail(console, f"Error deriving theme: {e}")

    click.echo(css)


@theme.command()
@click.argument('foreground')
@click.argument('background')
@click.option('--large', is_flag=True, help='Use the 3:1 large-text threshold')
def check(foreground: str, background: str, large: bool):
    """Check a foreground/background pair against WCAG AA."""
    console = Console()

    try:
        result = check_text_contrast(foreground, background, is_large_text=large)
    except ThemeEngineError as e:
        _fail(console, f"Error: {e}")

    verdict = "[green]PASS[/green]" if result.passes else "[red]FAIL[/red]"
    console.print(f"{verdict} {result.ratio:.2f}:1 (required {result.required}:1)")
    if not result.passes:
        sys.exit(1)


@theme.command()
@click.pass_context
def validate(ctx):
    """Validate every preset against the AA contrast invariant."""
    console = Console()
    engine = _get_engine(ctx)
    issues_found = 0

    for theme_info in engine.list_themes():
        issues = engine.validate_theme(theme_info['id'])
        if issues:
            console.print(f"[cyan]{theme_info['id']}[/cyan] [yellow]{len(issues)} issue(s)[/yellow]")
            for issue in issues:
                console.print(f"  [yellow]• {issue}[/yellow]")
            issues_found += len(issues)
        else:
            console.print(f"[cyan]{theme_info['id']}[/cyan] [green]valid[/green]")

    if issues_found:
        _fail(console, f"Found {issues_found} contrast issue(s).")
    console.print("[green]All presets pass WCAG AA.[/green]")


def get_theme_commands():
    """Get the theme command group for registration with main CLI."""
    return theme
