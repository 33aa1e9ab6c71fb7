"""Search data models."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Occurrence:
    """An occurrence of a keyword in a single document.

    ``frequency`` is only incremented while the owning document is being
    scanned; once merged into a posting list the occurrence is treated as
    read-only.
    """

    document: str
    frequency: int = 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"document": self.document, "frequency": self.frequency}

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"
