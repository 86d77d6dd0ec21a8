from pathlib import Path

from fastapi import APIRouter, Depends

from ..core.audit_log import FileLogSink
from ..core.compiler import PaletteCompiler
from ..models.api_schemas import CompileSummary
from .deps import get_compile_log_path, get_index_path, get_palette_dir

router = APIRouter()


@router.post("/compile", response_model=CompileSummary)
async def compile_index(
    palette_dir: Path = Depends(get_palette_dir),
    index_path: Path = Depends(get_index_path),
    log_path: Path = Depends(get_compile_log_path),
):
    report = PaletteCompiler(palette_dir, index_path, log_sink=FileLogSink(log_path)).run()
    return CompileSummary(**report.to_dict())
