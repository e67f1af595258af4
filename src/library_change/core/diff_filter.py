"""Reconstruct the before/after version of a file from diff-annotated lines."""

from enum import Enum
from typing import Iterable, List

ADDED_MARKER = "+"
REMOVED_MARKER = "-"


class DiffSide(str, Enum):
    """Which version of a file to reconstruct."""

    BEFORE = "before"
    AFTER = "after"


def is_added(line: str) -> bool:
    return line.startswith(ADDED_MARKER)


def is_removed(line: str) -> bool:
    return line.startswith(REMOVED_MARKER)


def is_context(line: str) -> bool:
    return not (is_added(line) or is_removed(line))


def reconstruct(lines: Iterable[str], side: DiffSide) -> List[str]:
    """Return the lines belonging to ``side`` of the diff, in order.

    Kept lines are returned verbatim; added and removed lines keep their
    leading marker character.
    """
    dropped = is_removed if side == DiffSide.AFTER else is_added
    return [line for line in lines if not dropped(line)]
