"""
Multipart form encoding for file uploads.

Caller inputs are normalized once into in-memory FileUpload objects. The
httpx `files` structure is then rebuilt for every attempt, so a retry never
reuses a multipart stream consumed by an earlier attempt.
"""

import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

DEFAULT_FILENAME = "blob"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class FileUpload:
    """
    A binary blob to upload.

    Attributes:
        filename: Name reported in the Content-Disposition header
        content: Raw file bytes
        content_type: MIME type of the part
    """

    filename: str
    content: bytes
    content_type: str = DEFAULT_CONTENT_TYPE

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike], content_type: str | None = None) -> "FileUpload":
        """Read a file from disk, guessing its MIME type from the extension."""
        file_path = Path(path)
        guessed, _ = mimetypes.guess_type(file_path.name)
        return cls(
            filename=file_path.name,
            content=file_path.read_bytes(),
            content_type=content_type or guessed or DEFAULT_CONTENT_TYPE,
        )


FileInput = Union[FileUpload, bytes, bytearray, tuple, str, os.PathLike]


def normalize_file(item: FileInput) -> FileUpload:
    """
    Convert one caller-supplied file into a FileUpload.

    Accepts FileUpload, raw bytes, (filename, bytes) or
    (filename, bytes, content_type) tuples, and filesystem paths.
    """
    if isinstance(item, FileUpload):
        return item
    if isinstance(item, (bytes, bytearray)):
        return FileUpload(filename=DEFAULT_FILENAME, content=bytes(item))
    if isinstance(item, tuple):
        if len(item) == 2:
            filename, content = item
            return FileUpload(filename=filename, content=bytes(content))
        if len(item) == 3:
            filename, content, content_type = item
            return FileUpload(filename=filename, content=bytes(content), content_type=content_type)
        raise ValueError(f"File tuple must have 2 or 3 items, got {len(item)}")
    if isinstance(item, (str, os.PathLike)):
        return FileUpload.from_path(item)
    raise TypeError(f"Unsupported file input: {type(item).__name__}")


def normalize_files(files: Sequence[FileInput]) -> list[FileUpload]:
    return [normalize_file(item) for item in files]


def encode_files(field_name: str, files: Sequence[FileUpload]) -> list[tuple[str, tuple[str, bytes, str]]]:
    """
    Build a fresh httpx `files` structure, one part per file under `field_name`.

    Called once per attempt.
    """
    return [(field_name, (f.filename, f.content, f.content_type)) for f in files]
