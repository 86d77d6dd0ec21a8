from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.types import Category
from .palette import PaletteSummary


class PaletteCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    category: Category = "sequential"
    colors: List[str] = Field(..., min_length=1)


class PaletteColors(BaseModel):
    name: str
    category: Category
    colors: List[str]


class CompileOutcomeOut(BaseModel):
    source: str
    status: Literal["accepted", "overwritten", "skipped"]
    message: str


class CompileSummary(BaseModel):
    output_path: Optional[str] = None
    written: bool
    terminal: Optional[Literal["no_definitions", "write_failed"]] = None
    counts: Dict[str, int] = Field(default_factory=dict)
    outcomes: List[CompileOutcomeOut] = Field(default_factory=list)


class GalleryPages(BaseModel):
    pages: Dict[str, List[PaletteSummary]]
    total: int
