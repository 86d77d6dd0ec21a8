from fastapi import FastAPI

from .api.admin import router as admin_router
from .api.palettes import router as palettes_router

app = FastAPI(title="bioPalette Service")

app.include_router(palettes_router, prefix="/api/v1", tags=["palettes"])
app.include_router(admin_router, prefix="/admin", tags=["admin"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
