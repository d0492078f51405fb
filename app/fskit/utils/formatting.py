"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich, and byte-size
formatting for human-readable summaries.
"""

import sys
from types import MappingProxyType

from rich.console import Console

from fskit.core.theme import get_rich_theme
from fskit.filesystem.errors import InvalidArgumentError


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
_theme = get_rich_theme()
console = Console(theme=_theme, color_system=_detect_color_system())
err_console = Console(theme=_theme, stderr=True, color_system=_detect_color_system())

# Unit name -> power of the base (1000 for decimal units, 1024 for binary "iB" units)
SIZE_UNIT_EXPONENTS = MappingProxyType(
    {
        "KB": 1,
        "KiB": 1,
        "MB": 2,
        "MiB": 2,
        "GB": 3,
        "GiB": 3,
        "TB": 4,
        "TiB": 4,
        "PB": 5,
        "PiB": 5,
    }
)

_AUTO_UNITS: tuple[str, ...] = ("KiB", "MiB", "GiB", "TiB", "PiB")


def format_size(
    size: int,
    unit: str,
    precision: int | None = None,
    add_unit: bool = True,
) -> str:
    """Format a byte count in the given unit.

    Args:
        size: Size in bytes.
        unit: One of KB, MB, GB, TB, PB (base 1000) or KiB, MiB, GiB,
            TiB, PiB (base 1024).
        precision: Number of decimals. None means no decimals.
        add_unit: Whether to append the unit to the value.

    Returns:
        Formatted size, e.g. "1.50 MiB".

    Raises:
        InvalidArgumentError: If the unit is unknown.
    """
    if unit not in SIZE_UNIT_EXPONENTS:
        allowed = '", "'.join(SIZE_UNIT_EXPONENTS)
        msg = f'Invalid size unit "{unit}". Allowed units are: "{allowed}".'
        raise InvalidArgumentError(msg)

    base = 1024 if "i" in unit else 1000
    value = size / base ** SIZE_UNIT_EXPONENTS[unit]
    formatted = f"{value:.{precision or 0}f}"
    return f"{formatted} {unit}" if add_unit else formatted


def format_size_auto(size_bytes: int | None) -> str:
    """Format byte count as human-readable string using binary units."""
    if not size_bytes:
        return "0 B"
    if abs(size_bytes) < 1024:
        return f"{size_bytes} B"
    unit = _AUTO_UNITS[-1]
    for candidate in _AUTO_UNITS:
        if abs(size_bytes) < 1024 ** (SIZE_UNIT_EXPONENTS[candidate] + 1):
            unit = candidate
            break
    return format_size(size_bytes, unit, precision=1)


# Set from the --quiet global option
_quiet = False


def set_quiet(quiet: bool) -> None:
    """Suppress info and success messages. Errors are always printed."""
    global _quiet
    _quiet = quiet


def print_info(message: str) -> None:
    """Print an info message."""
    if not _quiet:
        console.print(f"[info]{message}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    if not _quiet:
        console.print(f"[success]{message}[/]")
