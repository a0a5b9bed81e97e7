"""Path and URL helpers for bucket/key addressing."""

import posixpath
from typing import List, Tuple
from urllib.parse import quote

from ..entities import Breadcrumb

# Legacy endpoint naming: s3-external-1 serves us-east-1
REGION_ALIASES = {
    "external-1": "us-east-1",
}


def split_path(path: str) -> Tuple[str, str]:
    """
    Split a repository path into bucket and key.

    The first segment is always the bucket. Anything after the first
    slash is the key, which may be empty.

    Args:
        path: Repository path such as ``bucket`` or ``bucket/a/b.txt``

    Returns:
        Tuple of (bucket, key)
    """
    bucket, _, key = path.partition('/')
    return bucket, key


def url_region(region: str) -> str:
    """Region name to use in a public object URL."""
    return REGION_ALIASES.get(region, region)


def compute_direct_url(bucket: str, key: str, region: str) -> str:
    """
    Build the unsigned virtual-hosted URL of an object.

    The key is encoded as a single path segment, so slashes become %2F
    and spaces become %20.
    """
    return f"https://{bucket}.s3.{url_region(region)}.amazonaws.com/{quote(key, safe='')}"


def key_basename(key: str) -> str:
    """Last segment of a key, ignoring a trailing slash."""
    return posixpath.basename(key.rstrip('/'))


def build_breadcrumbs(path: str, root_name: str) -> List[Breadcrumb]:
    """
    Build the navigation trail for a path.

    The root crumb always comes first. A bucket-only path adds exactly one
    crumb for the bucket; deeper paths add one crumb per non-empty segment
    with a running ``segment/`` prefix.
    """
    crumbs = [Breadcrumb(name=root_name, path='')]
    if not path:
        return crumbs

    if '/' not in path:
        crumbs.append(Breadcrumb(name=path, path=path))
        return crumbs

    trail = ''
    for part in path.split('/'):
        if part:
            trail += part + '/'
            crumbs.append(Breadcrumb(name=part, path=trail))
    return crumbs
