"""Listing entities returned to the host file picker."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Union


@dataclass(frozen=True)
class FolderEntry:
    """A bucket or common prefix shown as a folder."""
    title: str
    path: str

    def to_dict(self) -> dict:
        """Convert to the host tree node format."""
        return {
            "title": self.title,
            "children": [],
            "path": self.path
        }


@dataclass(frozen=True)
class FileEntry:
    """An object shown as a selectable file."""
    title: str
    size: int
    source: str
    modified: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert to the host tree node format."""
        return {
            "title": self.title,
            "size": self.size,
            "datemodified": int(self.modified.timestamp()) if self.modified else None,
            "source": self.source
        }


ListingEntry = Union[FolderEntry, FileEntry]


@dataclass(frozen=True)
class Breadcrumb:
    """One step of the navigation trail."""
    name: str
    path: str

    def to_dict(self) -> dict:
        return {"name": self.name, "path": self.path}


@dataclass
class Listing:
    """
    Result of listing one level of the repository.

    Entries hold folders before files. The flag fields tell the host
    that folders load on demand and that no login or search UI applies.
    """
    entries: List[ListingEntry] = field(default_factory=list)
    breadcrumbs: List[Breadcrumb] = field(default_factory=list)
    manage: bool = False
    dynload: bool = True
    nologin: bool = True
    nosearch: bool = True

    @property
    def folders(self) -> List[FolderEntry]:
        return [entry for entry in self.entries if isinstance(entry, FolderEntry)]

    @property
    def files(self) -> List[FileEntry]:
        return [entry for entry in self.entries if isinstance(entry, FileEntry)]

    def to_dict(self) -> dict:
        """Convert listing to the host listing format."""
        return {
            "list": [entry.to_dict() for entry in self.entries],
            "path": [crumb.to_dict() for crumb in self.breadcrumbs],
            "manage": self.manage,
            "dynload": self.dynload,
            "nologin": self.nologin,
            "nosearch": self.nosearch
        }
