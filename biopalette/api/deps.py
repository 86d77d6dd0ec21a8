from pathlib import Path

from fastapi import HTTPException

from .. import settings
from ..core.errors import NotFoundError, PaletteError, StorageError, ValidationError


def get_palette_dir() -> Path:
    return Path(settings.PALETTE_DIR)


def get_index_path() -> Path:
    return Path(settings.PALETTE_INDEX)


def get_compile_log_path() -> Path:
    return Path(settings.PALETTE_COMPILE_LOG)


def get_creation_log_path() -> Path:
    return Path(settings.PALETTE_CREATION_LOG)


def http_error(exc: PaletteError) -> HTTPException:
    if isinstance(exc, ValidationError):
        detail = {"message": exc.message, "value": exc.value}
        if exc.suggestion:
            detail["suggestion"] = exc.suggestion
        return HTTPException(status_code=422, detail=detail)
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=404, detail={"message": exc.message, "value": exc.value})
    if isinstance(exc, StorageError):
        return HTTPException(status_code=503, detail={"message": exc.message})
    return HTTPException(status_code=500, detail={"message": str(exc)})
