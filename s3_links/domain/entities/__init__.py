"""Domain entities for the S3 links repository."""

from .listing import Breadcrumb, FileEntry, FolderEntry, Listing, ListingEntry
from .file_descriptor import FileDescriptor, FileReturnType
from .stored_object import ObjectPrefix, ObjectSummary, StoredItem

__all__ = [
    'Breadcrumb',
    'FileEntry',
    'FolderEntry',
    'Listing',
    'ListingEntry',
    'FileDescriptor',
    'FileReturnType',
    'ObjectPrefix',
    'ObjectSummary',
    'StoredItem'
]
