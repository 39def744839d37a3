"""
Photo files picked in the form
"""
import mimetypes
import os
from dataclasses import dataclass
from typing import Callable, Optional

from utils.image_utils import encode_data_url


@dataclass
class PhotoFile:
    """
    A file chosen for upload.

    content_type and size are what the file declares; the bytes are only
    read once the file has passed the type and size checks.
    """
    filename: str
    content_type: Optional[str]
    size: int
    read: Callable[[], bytes]

    @classmethod
    def from_path(cls, path: str) -> "PhotoFile":
        content_type, _ = mimetypes.guess_type(path)

        def read() -> bytes:
            with open(path, "rb") as f:
                return f.read()

        return cls(os.path.basename(path), content_type, os.path.getsize(path), read)

    @classmethod
    def from_bytes(cls, filename: str, content: bytes, content_type: str = None) -> "PhotoFile":
        if content_type is None:
            content_type, _ = mimetypes.guess_type(filename)
        return cls(filename, content_type, len(content), lambda: content)

    def to_data_url(self) -> str:
        return encode_data_url(self.read(), self.content_type)
