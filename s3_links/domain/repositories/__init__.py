"""Repository interfaces for the domain layer."""

from .object_store import ObjectStore
from .repository_browser import RepositoryBrowser

__all__ = [
    'ObjectStore',
    'RepositoryBrowser'
]
