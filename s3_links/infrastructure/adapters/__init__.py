"""Infrastructure adapters."""

from .s3_adapter import Boto3ObjectStore
from .s3_links_repository import S3LinksRepository

__all__ = [
    'Boto3ObjectStore',
    'S3LinksRepository'
]
