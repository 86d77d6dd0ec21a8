import os
from pathlib import Path

PALETTE_DIR = os.getenv("PALETTE_DIR", "colors")
PALETTE_INDEX = os.getenv("PALETTE_INDEX", str(Path(PALETTE_DIR) / "color_palettes.json"))
PALETTE_COMPILE_LOG = os.getenv("PALETTE_COMPILE_LOG", str(Path(PALETTE_DIR) / "compile_palettes.log"))
PALETTE_CREATION_LOG = os.getenv("PALETTE_CREATION_LOG", str(Path(PALETTE_DIR) / "palette_creation.log"))
GALLERY_PAGE_SIZE = int(os.getenv("GALLERY_PAGE_SIZE", "30"))
