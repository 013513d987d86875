import asyncio

import pytest

from common.storage.disk import UploadStorage, storage_name, write_upload


def test_storage_name_prefixes_timestamp():
    assert storage_name(1700000000123, "photo.png") == "1700000000123-photo.png"


def test_storage_name_drops_directories():
    assert storage_name(1, "../../etc/passwd") == "1-passwd"
    assert storage_name(1, "C:\\Users\\ada\\me.jpg") == "1-me.jpg"


def test_write_upload_writes_bytes_verbatim(upload_dir):
    path = write_upload(upload_dir, "1-a.bin", b"\x00\x01binary")
    assert path == upload_dir / "1-a.bin"
    assert path.read_bytes() == b"\x00\x01binary"


def test_write_upload_requires_existing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_upload(tmp_path / "missing", "1-a.bin", b"data")


def test_upload_storage_put_returns_generated_name(upload_dir):
    storage = UploadStorage(upload_dir)
    name = asyncio.run(storage.put(data=b"img", filename="me.jpg", received_at_ms=42))

    assert name == "42-me.jpg"
    assert (upload_dir / name).read_bytes() == b"img"


def test_storage_name_falls_back_when_basename_is_empty():
    assert storage_name(7, "dir/") == "7-upload.bin"
    assert storage_name(7, "") == "7-upload.bin"
