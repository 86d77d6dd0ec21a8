"""Common lightweight type aliases used across the palette store."""

from typing import Literal, Tuple

Category = Literal["sequential", "diverging", "qualitative"]

# Fixed order: discovery, fallback lookup and listing all walk categories like this.
CATEGORIES: Tuple[str, ...] = ("sequential", "diverging", "qualitative")

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}([0-9A-Fa-f]{2})?$"

__all__ = ["Category", "CATEGORIES", "HEX_COLOR_PATTERN"]
