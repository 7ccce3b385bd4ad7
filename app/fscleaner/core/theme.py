"""Color theme for cleanup notices and summaries.

Colors are layered: model defaults, then the bundled data/theme.toml,
then the user's ~/.config/fscleaner/theme.toml. A layer that cannot be
read or fails validation is skipped with a warning, so a broken user
file never stops a cleanup run.
"""

import logging
import tomllib
from functools import lru_cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from rich.theme import Theme

from fscleaner.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

HexColor = Annotated[
    str,
    StringConstraints(strip_whitespace=True, pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$"),
]

# Styles rendered bold: labels that start a notice line, and the header.
_BOLD_STYLES = frozenset({"header", "error", "skipping", "deleting", "removing", "dry_run"})


class ThemeError(ValueError):
    """A theme file exists but cannot be used."""


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) for every style the CLI prints with."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    header: HexColor = "#69B9A1"
    muted: HexColor = "#b2bec3"
    info: HexColor = "#0ec1c8"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"

    skipping: HexColor = "#03b971"
    deleting: HexColor = "#f53263"
    removing: HexColor = "#f53263"
    dry_run: HexColor = "#f5b332"

    def to_rich_theme(self) -> Theme:
        """Build the Rich theme, one style per color."""
        return Theme(
            {
                name: f"bold {color}" if name in _BOLD_STYLES else color
                for name, color in self.model_dump().items()
            }
        )


def bundled_theme_file() -> Traversable:
    """Theme file shipped inside the package."""
    return resources.files("fscleaner.data") / "theme.toml"


def read_theme_file(source: Traversable | Path) -> dict[str, object]:
    """Read the [colors] table of a theme file.

    Args:
        source: Theme file to read.

    Returns:
        Color overrides by style name; empty if the file does not exist
        or has no [colors] table.

    Raises:
        ThemeError: If the file cannot be read or parsed.
    """
    try:
        with source.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        msg = f"cannot read {source}: {e}"
        raise ThemeError(msg) from e

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        msg = f"'colors' in {source} must be a table"
        raise ThemeError(msg)
    return colors


def load_theme_colors(user_file: Path | None = None) -> ThemeColors:
    """Resolve theme colors from the bundled file and the user override.

    Args:
        user_file: User override file. Defaults to the XDG config location.

    Returns:
        Merged and validated colors.
    """
    if user_file is None:
        user_file = get_user_theme_path()

    colors = ThemeColors()
    for source in (bundled_theme_file(), user_file):
        try:
            overrides = read_theme_file(source)
            colors = ThemeColors.model_validate({**colors.model_dump(), **overrides})
        except ValueError as e:
            logger.warning("Ignoring theme file %s: %s", source, e)
            continue
        if overrides:
            logger.debug("Applied %d theme color(s) from %s", len(overrides), source)
    return colors


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Rich theme for this process, loaded on first use."""
    return load_theme_colors().to_rich_theme()
