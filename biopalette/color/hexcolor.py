from __future__ import annotations

import re
from typing import Any, Iterable, List

from ..core.errors import ValidationError
from ..core.types import CATEGORIES, HEX_COLOR_PATTERN

_HEX_RE = re.compile(HEX_COLOR_PATTERN)


def is_hex_color(value: Any) -> bool:
    """``True`` for ``#RRGGBB`` or ``#RRGGBBAA`` strings (any hex case)."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def invalid_colors(colors: Iterable[Any]) -> List[Any]:
    return [color for color in colors if not is_hex_color(color)]


def validate_category(category: Any) -> str:
    if category not in CATEGORIES:
        raise ValidationError(
            f"Invalid type '{category}', available types: {', '.join(CATEGORIES)}",
            value=category,
        )
    return category


def validate_colors(colors: Any) -> List[str]:
    if isinstance(colors, str) or not isinstance(colors, (list, tuple)) or not colors:
        raise ValidationError("Palette colors must be a non-empty list of HEX codes", value=colors)
    bad = invalid_colors(colors)
    if bad:
        raise ValidationError(
            f"Color values must be valid HEX codes, e.g. '#FF5733' or '#FF5733B2'; got {bad}",
            value=bad,
        )
    return list(colors)


def validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"Palette name must be a non-empty string, got {name!r}", value=name)
    return name


__all__ = ["is_hex_color", "invalid_colors", "validate_category", "validate_colors", "validate_name"]
