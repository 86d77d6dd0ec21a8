"""Palette lookup by name and category."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from ..color.hexcolor import validate_category
from ..models.palette import PaletteIndex
from .errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _validate_n(n: Any, name: str, available: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise ValidationError(
            f"Parameter 'n' must be a positive int (floats such as 2.0 are not accepted), current value: {n!r}",
            value=n,
        )
    if n > available:
        raise ValidationError(
            f"Requested number of colors ({n}) exceeds available colors in '{name}' ({available})!",
            value=n,
        )
    return n


def get_palette(
    index: PaletteIndex,
    name: str,
    category: str = "sequential",
    n: Optional[int] = None,
) -> List[str]:
    """Return the colors of palette ``name`` under ``category``.

    When the name only exists under another category the lookup fails with
    a :class:`ValidationError` whose ``suggestion`` is that category; the
    caller has to retry with it. ``n`` keeps the first ``n`` colors in
    stored order.
    """
    validate_category(category)
    if not isinstance(name, str):
        raise ValidationError(f"Palette name must be a single string, got {name!r}", value=name)

    palettes = index.palettes(category)
    if name not in palettes:
        found = index.find(name)
        if not found:
            logger.warning("Palette '%s' not found in any type.", name)
            raise NotFoundError(f"Palette '{name}' does not exist in any type.", value=name)
        logger.warning("Palette '%s' not found in type '%s', but found in '%s'", name, category, found[0])
        raise ValidationError(
            f"Palette '{name}' not found in type '{category}', but found in '{found[0]}'. "
            f"Consider changing the type parameter to '{found[0]}'.",
            value=category,
            suggestion=found[0],
        )

    colors = palettes[name]
    logger.debug("Extracted '%s', number of colors: %d", name, len(colors))
    if n is None:
        return list(colors)
    return list(colors[: _validate_n(n, name, len(colors))])


__all__ = ["get_palette"]
