"""Upload artifact storage.

Artifacts are named after the local wall-clock second they were received in
and written as header || payload. Two uploads within the same second share a
name; the later one overwrites the earlier.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import aiofiles

logger = logging.getLogger(__name__)

__all__ = [
    "FILENAME_FORMAT",
    "FileCreateError",
    "FileWriteError",
    "StorageError",
    "build_upload_filename",
    "write_wav_file",
]

FILENAME_FORMAT = "%d_%m_%Y_%H_%M_%S.wav"


class StorageError(Exception):
    """Writing an upload artifact failed. `message` is safe to return to callers."""

    def __init__(self, message: str, path: Path):
        super().__init__(f"{message}: {path}")
        self.message = message
        self.path = path


class FileCreateError(StorageError):
    pass


class FileWriteError(StorageError):
    pass


def build_upload_filename(now: Optional[datetime] = None) -> str:
    """DD_MM_YYYY_HH_MM_SS.wav in local time."""
    return (now or datetime.now()).strftime(FILENAME_FORMAT)


async def write_wav_file(
    storage_dir: Union[str, Path],
    filename: str,
    header: bytes,
    body: bytes,
) -> Path:
    """Create `storage_dir/filename` and write `header` then `body` into it.

    The directory must already exist. A failure after the file was created
    leaves whatever was written so far on disk.
    """
    path = Path(storage_dir) / filename

    try:
        f = await aiofiles.open(path, "wb")
    except OSError as e:
        raise FileCreateError("Failed to create file", path) from e

    try:
        try:
            await f.write(header)
        except OSError as e:
            raise FileWriteError("Failed to write WAV header", path) from e
        try:
            await f.write(body)
            await f.flush()
        except OSError as e:
            raise FileWriteError("Failed to write audio data", path) from e
    except FileWriteError:
        # The write error is what the caller sees; a close error is only logged.
        try:
            await f.close()
        except OSError as e:
            logger.warning(f"Failed to close {path} after write error: {e}")
        raise

    try:
        await f.close()
    except OSError as e:
        raise FileWriteError("Failed to write audio data", path) from e

    logger.debug(f"Wrote {len(header) + len(body)} bytes to {path}")
    return path
