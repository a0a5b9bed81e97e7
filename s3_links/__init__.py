"""
Amazon S3 links repository.

Lets a file picker browse S3 buckets as folders and reference objects
through direct, unsigned URLs.
"""

from .config import ProxySettings, RepositoryConfig
from .domain.exceptions import MissingCredentialsError, RemoteCommunicationError, RepositoryError
from .infrastructure.adapters import S3LinksRepository

__all__ = [
    'ProxySettings',
    'RepositoryConfig',
    'MissingCredentialsError',
    'RemoteCommunicationError',
    'RepositoryError',
    'S3LinksRepository'
]
