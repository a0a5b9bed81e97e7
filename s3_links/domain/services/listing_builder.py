"""Listing shaping domain service."""

import logging
from typing import Iterable, List

from ..entities import FileEntry, FolderEntry, ListingEntry, ObjectPrefix, StoredItem

logger = logging.getLogger(__name__)


class ListingBuilderService:
    """
    Domain service turning object store results into listing entries.

    Titles are made relative to the requested prefix. An entry whose
    relative title is empty (the prefix itself, or a directory marker
    object) is dropped.
    """

    def build_bucket_entries(self, buckets: Iterable[str]) -> List[ListingEntry]:
        """One folder per bucket, addressed by the bucket name."""
        return [FolderEntry(title=bucket, path=bucket) for bucket in buckets]

    def build_level_entries(self, bucket: str, prefix: str,
                            items: Iterable[StoredItem]) -> List[ListingEntry]:
        """
        Build the entries for one level of a bucket.

        Args:
            bucket: Bucket that was listed
            prefix: Prefix the listing was scoped to
            items: Common prefixes and objects from the object store

        Returns:
            Folders followed by files, each group in listing order
        """
        folders = []
        files = []

        for item in items:
            if isinstance(item, ObjectPrefix):
                title = self._relative_title(item.prefix.rstrip('/'), prefix)
                if not title:
                    logger.debug(f"Skipping folder {bucket}/{item.prefix}: same as requested prefix")
                    continue
                folders.append(FolderEntry(title=title, path=f"{bucket}/{item.prefix}"))
            else:
                title = self._relative_title(item.key, prefix)
                if not title:
                    logger.debug(f"Skipping directory marker {bucket}/{item.key}")
                    continue
                files.append(FileEntry(
                    title=title,
                    size=item.size,
                    source=f"{bucket}/{item.key}",
                    modified=item.last_modified
                ))

        return folders + files

    def _relative_title(self, name: str, prefix: str) -> str:
        if prefix:
            return name[len(prefix):]
        return name
