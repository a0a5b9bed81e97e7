"""Object store listing items."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union


@dataclass(frozen=True)
class ObjectPrefix:
    """A common prefix returned by a delimited listing."""
    prefix: str


@dataclass(frozen=True)
class ObjectSummary:
    """An object returned by a listing or a metadata lookup."""
    key: str
    size: int
    last_modified: Optional[datetime] = None


StoredItem = Union[ObjectPrefix, ObjectSummary]
