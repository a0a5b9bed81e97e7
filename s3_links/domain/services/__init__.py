"""Domain services for path handling and listing shaping."""

from .listing_builder import ListingBuilderService
from .paths import build_breadcrumbs, compute_direct_url, key_basename, split_path, url_region

__all__ = [
    'ListingBuilderService',
    'build_breadcrumbs',
    'compute_direct_url',
    'key_basename',
    'split_path',
    'url_region'
]
