"""Amazon S3 links repository."""

import logging
from typing import Optional

from ...config import ProxySettings, RepositoryConfig
from ...domain.entities import FileDescriptor, FileReturnType, Listing
from ...domain.exceptions import MissingCredentialsError, ObjectStoreError, RemoteCommunicationError
from ...domain.repositories import ObjectStore, RepositoryBrowser
from ...domain.services import (
    ListingBuilderService,
    build_breadcrumbs,
    compute_direct_url,
    key_basename,
    split_path,
)
from .s3_adapter import Boto3ObjectStore

logger = logging.getLogger(__name__)


class S3LinksRepository(RepositoryBrowser):
    """
    Repository browsing S3 buckets and linking to objects directly.

    Paths are ``bucket`` or ``bucket/key``. Links are unsigned
    virtual-hosted URLs, so they only resolve for publicly readable
    objects.
    """

    def __init__(self, config: RepositoryConfig, store: Optional[ObjectStore] = None,
                 proxy: Optional[ProxySettings] = None):
        self.config = config
        self.store = store or Boto3ObjectStore.from_config(config, proxy)
        self.listing_builder = ListingBuilderService()

    @property
    def name(self) -> str:
        return self.config.display_name

    def list(self, path: str = '', page: str = '') -> Listing:
        """List buckets at the top level, or one level of a bucket."""
        if not self.config.has_access_key:
            raise MissingCredentialsError()

        try:
            if not path:
                logger.info("Listing buckets")
                entries = self.listing_builder.build_bucket_entries(self.store.list_buckets())
            else:
                bucket, prefix = split_path(path)
                logger.info(f"Listing s3://{bucket}/{prefix}")
                items = self.store.list_objects(bucket, prefix, delimiter='/')
                entries = self.listing_builder.build_level_entries(bucket, prefix, items)
        except ObjectStoreError as e:
            raise RemoteCommunicationError(self.name, str(e)) from e

        return Listing(entries=entries, breadcrumbs=build_breadcrumbs(path, self.name))

    def resolve_file(self, path: str) -> FileDescriptor:
        """Resolve a file to its direct URL and size."""
        bucket, key = split_path(path)
        url = compute_direct_url(bucket, key, self.config.region)
        try:
            info = self.store.get_object_info(bucket, key)
        except ObjectStoreError as e:
            raise RemoteCommunicationError(self.name, str(e)) from e

        return FileDescriptor(url=url, path=path, filename=key_basename(key), size=info.size)

    def get_link(self, path: str) -> str:
        bucket, key = split_path(path)
        return compute_direct_url(bucket, key, self.config.region)

    def get_source_info(self, path: str) -> str:
        return f"Amazon S3 URL: {path}"

    def supported_return_types(self) -> FileReturnType:
        return FileReturnType.FILE_INTERNAL | FileReturnType.FILE_EXTERNAL | FileReturnType.FILE_REFERENCE

    def supported_features(self) -> FileReturnType:
        return self.supported_return_types() | FileReturnType.FILE_CONTROLLED_LINK

    def contains_private_data(self) -> bool:
        return False
