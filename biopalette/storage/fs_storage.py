import json
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from ..core.errors import StorageError

PathLike = Union[str, Path]


class FSStorage:
    """Local filesystem storage; relative paths resolve against ``root`` when set."""

    def __init__(self, root: Optional[PathLike] = None):
        self.root = Path(root) if root is not None else None

    def resolve(self, path: PathLike) -> Path:
        p = Path(path)
        if self.root is not None and not p.is_absolute():
            p = self.root / p
        return p

    def exists(self, path: PathLike) -> bool:
        return self.resolve(path).exists()

    def save_bytes(self, path: PathLike, data: bytes) -> Path:
        p = self.resolve(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)
        return p

    def save_json(self, path: PathLike, obj: Any) -> Path:
        return self.save_bytes(path, json.dumps(obj, ensure_ascii=False, indent=2).encode("utf-8"))

    def load_json(self, path: PathLike) -> Any:
        p = self.resolve(path)
        if not p.exists():
            raise StorageError(f"File not found: {p}", path=p)
        try:
            return json.loads(p.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StorageError(f"Failed to read {p}: {exc}", path=p) from exc

    def append_lines(self, path: PathLike, lines: Iterable[str]) -> Path:
        p = self.resolve(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("a", encoding="utf-8") as handle:
            for line in lines:
                handle.write(f"{line}\n")
        return p
