"""Object store interface."""

from abc import ABC, abstractmethod
from typing import List

from ..entities import ObjectSummary, StoredItem


class ObjectStore(ABC):
    """
    Interface for the S3-compatible storage the repository browses.

    Implementations raise ``ObjectStoreError`` for any transport or
    service failure.
    """

    @abstractmethod
    def list_buckets(self) -> List[str]:
        """
        List the buckets visible to the configured credentials.

        Returns:
            Bucket names in the order the service returns them
        """
        pass

    @abstractmethod
    def list_objects(self, bucket: str, prefix: str = '', delimiter: str = '/') -> List[StoredItem]:
        """
        List one level of a bucket.

        Args:
            bucket: The storage bucket
            prefix: Only keys starting with this prefix are returned
            delimiter: Keys are grouped into common prefixes up to this character

        Returns:
            Common prefixes and objects, in service order
        """
        pass

    @abstractmethod
    def get_object_info(self, bucket: str, key: str) -> ObjectSummary:
        """
        Get object metadata.

        Args:
            bucket: The storage bucket
            key: The object key

        Returns:
            Object summary with size and modification time
        """
        pass
