import logging
import os
from pathlib import Path

from linkpage.components.uploads import UploadFailure, UploadResult

logger = logging.getLogger(__name__)


class FileSystemStore:
    """Stores uploads under base_path and serves them back from public_prefix."""

    def __init__(self, base_path: str, public_prefix: str = "/assets"):
        self.base_path = Path(base_path).resolve()
        self.public_prefix = public_prefix.rstrip("/")
        if not self.base_path.exists():
            os.makedirs(self.base_path, exist_ok=True)

    def _safe_path(self, path: str) -> Path:
        # Prevent traversal
        target = (self.base_path / path).resolve()
        if not target.is_relative_to(self.base_path):
            raise ValueError(f"Path traversal attempt detected: {path}")
        return target

    def upload(self, data: bytes, destination_path: str, upsert: bool = True) -> UploadResult:
        try:
            target = self._safe_path(destination_path)
        except ValueError as e:
            raise UploadFailure(str(e)) from e

        if target.exists() and not upsert:
            raise UploadFailure(f"File already exists: {destination_path}")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "wb") as f:
                f.write(data)
        except OSError as e:
            raise UploadFailure(f"Could not write {destination_path}: {e}") from e

        relative = target.relative_to(self.base_path).as_posix()
        return UploadResult(public_url=f"{self.public_prefix}/{relative}", path=relative)

    def resolve(self, path: str) -> Path:
        """Local file for a stored path. Raises FileNotFoundError."""
        target = self._safe_path(path)
        if not target.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return target
