"""Version-dependent command-line flag rendering.

consul_exporter switched from Go's single-dash flags to kingpin's
double-dash flags in 0.4.0. The rule table maps the minimum release of
each style to that style; new thresholds are added as new rows.
"""

from enum import Enum

from consul_exporter.const import DOUBLE_DASH_FLAGS_VERSION
from consul_exporter.types import Version


class FlagStyle(str, Enum):
    """Prefix used for every flag on a daemon command line."""

    SINGLE_DASH = "-"
    DOUBLE_DASH = "--"


# Ordered by ascending minimum version
FLAG_STYLE_RULES: tuple[tuple[Version, FlagStyle], ...] = (
    (Version("0.0.0"), FlagStyle.SINGLE_DASH),
    (Version(DOUBLE_DASH_FLAGS_VERSION), FlagStyle.DOUBLE_DASH),
)


def flag_style_for(
    version: Version,
    rules: tuple[tuple[Version, FlagStyle], ...] = FLAG_STYLE_RULES,
) -> FlagStyle:
    """Select the flag style of the last rule whose minimum is <= version.

    Args:
        version: Exporter release being configured
        rules: Ordered (minimum version, style) table

    Returns:
        The matching FlagStyle

    Raises:
        ValueError: If the version is older than every rule
    """
    selected: FlagStyle | None = None
    for min_version, style in rules:
        if version >= min_version:
            selected = style
    if selected is None:
        raise ValueError(f"No flag style rule covers version {version}")
    return selected


def render_flag(style: FlagStyle, name: str, value: str | None = None) -> str:
    """Render a single flag, e.g. ``--web.listen-address=:9107``."""
    if value is None:
        return f"{style.value}{name}"
    return f"{style.value}{name}={value}"
