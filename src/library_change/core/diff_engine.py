"""Keyed diff between two sets of dependency records."""

from typing import Dict, Iterable, List

from library_change.models.change import ChangeEntry
from library_change.models.dependency import DependencyRecord


def index_by_key(records: Iterable[DependencyRecord]) -> Dict[str, DependencyRecord]:
    """Map ``group:identifier`` to its record; later duplicates win."""
    indexed: Dict[str, DependencyRecord] = {}
    for record in records:
        indexed[record.key] = record
    return indexed


def diff(
    before_records: Iterable[DependencyRecord],
    after_records: Iterable[DependencyRecord],
) -> List[ChangeEntry]:
    """Pair up dependencies from before and after a commit.

    Entries for keys present before the commit come first, in their
    original order, followed by keys that only exist afterwards.
    """
    before = index_by_key(before_records)
    after = index_by_key(after_records)

    changes = [
        ChangeEntry(previous=record, current=after.get(key))
        for key, record in before.items()
    ]
    changes.extend(
        ChangeEntry(previous=None, current=record)
        for key, record in after.items()
        if key not in before
    )
    return changes
