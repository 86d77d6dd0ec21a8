from typing import Annotated, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from ..core.types import CATEGORIES, Category, HEX_COLOR_PATTERN

HexColor = Annotated[str, StringConstraints(pattern=HEX_COLOR_PATTERN)]


class PaletteDefinition(BaseModel):
    """A single palette as stored in ``<category>/<name>.json``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    category: Category = Field(..., alias="type")
    colors: List[HexColor] = Field(..., min_length=1)

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True)


class PaletteIndex(BaseModel):
    """Compiled palettes: category -> name -> ordered colors."""

    model_config = ConfigDict(extra="forbid")

    sequential: Dict[str, List[HexColor]] = Field(default_factory=dict)
    diverging: Dict[str, List[HexColor]] = Field(default_factory=dict)
    qualitative: Dict[str, List[HexColor]] = Field(default_factory=dict)

    def palettes(self, category: str) -> Dict[str, List[str]]:
        return getattr(self, category)

    def add(self, definition: PaletteDefinition) -> bool:
        """Insert ``definition``; returns ``True`` if it replaced an entry."""
        bucket = self.palettes(definition.category)
        replaced = definition.name in bucket
        bucket[definition.name] = list(definition.colors)
        return replaced

    def find(self, name: str) -> List[str]:
        """Categories containing ``name``, in fixed category order."""
        return [category for category in CATEGORIES if name in self.palettes(category)]

    def counts(self) -> Dict[str, int]:
        return {category: len(self.palettes(category)) for category in CATEGORIES}

    def to_dict(self) -> dict:
        return self.model_dump()


class PaletteSummary(BaseModel):
    name: str
    category: Category
    count: int
