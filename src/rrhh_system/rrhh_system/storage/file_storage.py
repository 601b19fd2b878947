from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path, PurePosixPath
from typing import Optional, Protocol

from werkzeug.utils import secure_filename

from ..core.constants import STORAGE_BUCKET, STORAGE_PREFIX
from ..core.exceptions import ExternalServiceError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Upload:
    """A file received from a form, detached from the request object."""

    filename: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def extension(self) -> str:
        name = secure_filename(self.filename or "")
        if "." not in name:
            return "bin"
        return name.rsplit(".", 1)[-1].lower()

    @classmethod
    def from_werkzeug(cls, file) -> Optional["Upload"]:
        if file is None or not getattr(file, "filename", ""):
            return None
        return cls(filename=file.filename, content=file.read(), content_type=file.mimetype)


def build_object_path(owner: str | int, upload: Upload, *, stem: str = "", now: Optional[datetime] = None) -> str:
    """somyl_rrhh/<owner>/<stem><millis>.<ext>"""

    now = now or datetime.now()
    millis = int(now.timestamp() * 1000)
    name = secure_filename(f"{stem}{millis}.{upload.extension}")
    return f"{STORAGE_PREFIX}/{owner}/{name}"


class FileStorage(Protocol):
    def upload(self, path: str, upload: Upload) -> str:
        """Store the file at path and return the stored path."""

        raise NotImplementedError

    def public_url(self, path: str) -> str:
        raise NotImplementedError


class LocalFileStorage(FileStorage):
    """Bucket-like storage on the local filesystem.

    Files live under <root>/<bucket>/<path> and are served by the app under
    <base_url>/<bucket>/<path>.
    """

    def __init__(self, root: str | Path, *, bucket: str = STORAGE_BUCKET, base_url: str = "/files"):
        self._root = Path(root)
        self._bucket = bucket
        self._base_url = base_url.rstrip("/")

    @property
    def bucket_dir(self) -> Path:
        return self._root / self._bucket

    def _resolve(self, path: str) -> Path:
        rel = PurePosixPath(path)
        if rel.is_absolute() or ".." in rel.parts:
            raise ValidationError("Ruta de archivo inválida")
        return self.bucket_dir.joinpath(*rel.parts)

    def upload(self, path: str, upload: Upload) -> str:
        target = self._resolve(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(upload.content)
        except OSError as e:
            logger.error("Upload to %s failed: %s", path, e)
            raise ExternalServiceError(f"No se pudo subir el archivo: {e}")
        return path

    def public_url(self, path: str) -> str:
        return f"{self._base_url}/{self._bucket}/{path}"

    def open_path(self, path: str) -> Path:
        return self._resolve(path)
