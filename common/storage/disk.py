from __future__ import annotations
import time
from pathlib import Path

from starlette.concurrency import run_in_threadpool


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def storage_name(timestamp_ms: int, original_name: str) -> str:
    """Name an upload ``<epoch-ms>-<original-name>``.

    Directory parts of the client supplied name are dropped so every upload
    lands directly in the upload directory.
    """
    basename = original_name.replace("\\", "/").rsplit("/", 1)[-1] or "upload.bin"
    return f"{timestamp_ms}-{basename}"


def write_upload(directory: Path, name: str, data: bytes) -> Path:
    # the directory is not created here; it has to exist already
    path = directory / name
    path.write_bytes(data)
    return path


class UploadStorage:
    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    async def put(self, *, data: bytes, filename: str, received_at_ms: int) -> str:
        name = storage_name(received_at_ms, filename)
        await run_in_threadpool(write_upload, self.directory, name, data)
        return name
