"""File descriptor entity."""

from dataclasses import dataclass
from enum import IntFlag
from typing import Optional


class FileReturnType(IntFlag):
    """Ways the host may store a file picked from a repository."""
    FILE_EXTERNAL = 1
    FILE_INTERNAL = 2
    FILE_REFERENCE = 4
    FILE_INTERNAL_REFERENCE = 8
    FILE_CONTROLLED_LINK = 32


@dataclass(frozen=True)
class FileDescriptor:
    """
    Describes a resolved file.

    The url is a direct, unsigned link to the object; it only works when
    the object is publicly readable or authorized elsewhere.
    """
    url: str
    path: str
    filename: str
    size: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to the host file record format."""
        return {
            "url": self.url,
            "filepath": self.path,
            "filename": self.filename,
            "filesize": self.size
        }
