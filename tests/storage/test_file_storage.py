from __future__ import annotations

from datetime import datetime

import pytest

from src.rrhh_system.rrhh_system.core.exceptions import ValidationError
from src.rrhh_system.rrhh_system.storage.file_storage import LocalFileStorage, Upload, build_object_path


def test_object_path_layout():
    up = Upload(filename="Mi Certificado.PDF", content=b"%PDF")
    path = build_object_path(12, up, stem="cert_3_", now=datetime(2026, 3, 15, 10, 0))

    assert path.startswith("somyl_rrhh/12/cert_3_")
    assert path.endswith(".pdf")


def test_extension_fallback():
    assert Upload(filename="sinextension", content=b"").extension == "bin"


def test_upload_writes_under_bucket(tmp_path):
    storage = LocalFileStorage(tmp_path, bucket="rrhh-files")
    stored = storage.upload("somyl_rrhh/1/foto_1.jpg", Upload(filename="foto.jpg", content=b"img"))

    assert (tmp_path / "rrhh-files" / "somyl_rrhh" / "1" / "foto_1.jpg").read_bytes() == b"img"
    assert storage.public_url(stored) == "/files/rrhh-files/somyl_rrhh/1/foto_1.jpg"


@pytest.mark.parametrize("path", ["../etc/passwd", "/abs/file.txt", "a/../../b"])
def test_path_traversal_rejected(tmp_path, path):
    storage = LocalFileStorage(tmp_path)
    with pytest.raises(ValidationError):
        storage.upload(path, Upload(filename="x.txt", content=b"x"))
