"""Index metadata."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Index:
    """A named index over an ordered list of column names."""
    name: Optional[str] = None
    column_names: List[str] = field(default_factory=list)
    is_unique: bool = False
