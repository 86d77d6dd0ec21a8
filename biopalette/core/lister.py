from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, List, Optional

from ..color.hexcolor import validate_category
from ..models.palette import PaletteIndex, PaletteSummary
from .errors import ValidationError
from .types import CATEGORIES

logger = logging.getLogger(__name__)


def _selected(categories: Optional[Iterable[str]]) -> List[str]:
    if categories is None:
        return list(CATEGORIES)
    if isinstance(categories, str):
        categories = [categories]
    wanted = {validate_category(c) for c in categories}
    return [c for c in CATEGORIES if c in wanted]


def list_palettes(index: PaletteIndex, categories: Optional[Iterable[str]] = None) -> List[PaletteSummary]:
    """Summaries grouped by category; most colors first, then by name."""
    summaries: List[PaletteSummary] = []
    for category in _selected(categories):
        entries = sorted(index.palettes(category).items(), key=lambda item: (-len(item[1]), item[0]))
        summaries.extend(
            PaletteSummary(name=name, category=category, count=len(colors)) for name, colors in entries
        )
    return summaries


def gallery_pages(
    index: PaletteIndex,
    categories: Optional[Iterable[str]] = None,
    page_size: int = 30,
) -> Dict[str, List[PaletteSummary]]:
    """Split the listing into pages keyed ``<category>_page<k>``."""
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
        raise ValidationError("page_size must be a positive integer.", value=page_size)

    pages: Dict[str, List[PaletteSummary]] = {}
    for category in _selected(categories):
        items = list_palettes(index, [category])
        if not items:
            logger.warning("No palettes available for type: %s", category)
            continue
        total_pages = math.ceil(len(items) / page_size)
        logger.info("Type %s: %d palettes -> %d page(s)", category, len(items), total_pages)
        for page in range(total_pages):
            pages[f"{category}_page{page + 1}"] = items[page * page_size : (page + 1) * page_size]
    return pages


__all__ = ["gallery_pages", "list_palettes"]
