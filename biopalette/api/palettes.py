from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from .. import settings
from ..color.palette_loader import load_index
from ..core.creator import create_palette, definition_path
from ..core.errors import PaletteError
from ..core.lister import gallery_pages, list_palettes
from ..core.retriever import get_palette
from ..models.api_schemas import GalleryPages, PaletteColors, PaletteCreateRequest
from ..models.palette import PaletteSummary
from .deps import get_creation_log_path, get_index_path, get_palette_dir, http_error

router = APIRouter()

# =====================================================================
#   LIST / GALLERY
# =====================================================================

@router.get("/palettes", response_model=List[PaletteSummary])
async def list_all(
    category: Optional[List[str]] = Query(None),
    index_path: Path = Depends(get_index_path),
):
    try:
        return list_palettes(load_index(index_path), category)
    except PaletteError as exc:
        raise http_error(exc)


@router.get("/gallery", response_model=GalleryPages)
async def gallery(
    category: Optional[List[str]] = Query(None),
    page_size: int = settings.GALLERY_PAGE_SIZE,
    index_path: Path = Depends(get_index_path),
):
    try:
        pages = gallery_pages(load_index(index_path), category, page_size=page_size)
    except PaletteError as exc:
        raise http_error(exc)
    return GalleryPages(pages=pages, total=sum(len(items) for items in pages.values()))


# =====================================================================
#   GET
# =====================================================================

@router.get("/palettes/{category}/{name}", response_model=PaletteColors)
async def get_one(
    category: str,
    name: str,
    n: Optional[int] = None,
    index_path: Path = Depends(get_index_path),
):
    try:
        colors = get_palette(load_index(index_path), name, category, n)
    except PaletteError as exc:
        raise http_error(exc)
    return PaletteColors(name=name, category=category, colors=colors)


# =====================================================================
#   CREATE
# =====================================================================

@router.post("/palettes", status_code=201)
async def create(
    payload: PaletteCreateRequest,
    palette_dir: Path = Depends(get_palette_dir),
    log_path: Path = Depends(get_creation_log_path),
):
    try:
        path = create_palette(
            payload.name, payload.colors, payload.category, color_dir=palette_dir, log_path=log_path
        )
    except PaletteError as exc:
        raise http_error(exc)
    if path is None:
        existing = definition_path(palette_dir, payload.category, payload.name)
        raise HTTPException(status_code=409, detail={"message": f"Palette already exists: {existing}"})
    return {"path": str(path), "name": payload.name, "category": payload.category}
