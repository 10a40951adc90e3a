"""Shared pieces for the sensor and asset validators."""

from dataclasses import dataclass
from typing import Hashable, Iterable

# Subject used when a record's own id is empty
EMPTY_ID_MARKER = "<empty>"

# Subject used for catalog-wide findings that belong to no single record
AGGREGATE_MARKER = "*"


@dataclass(frozen=True)
class ValidationFinding:
    """One violated rule for one record (or for the catalog as a whole)."""
    subject_id: str
    message: str

    def render(self, kind: str) -> str:
        """Format as a report line, e.g. 'Sensor s1: Empty display name'."""
        return f"{kind} {self.subject_id}: {self.message}"


def subject_for(record_id: str) -> str:
    return record_id if record_id else EMPTY_ID_MARKER


def has_duplicates(keys: Iterable[Hashable]) -> bool:
    """Return True if any key occurs more than once."""
    keys = list(keys)
    return len(set(keys)) != len(keys)
