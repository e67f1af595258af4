"""Change entry model pairing a dependency before and after a commit."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, computed_field, model_validator

from .dependency import DependencyRecord


class ChangeType(str, Enum):
    """Classification of a dependency change."""

    NO_CHANGE = "NO_CHANGE"
    VERSION_CHANGE = "VERSION_CHANGE"
    ADDITION = "ADDITION"
    REMOVAL = "REMOVAL"
    REPLACEMENT = "REPLACEMENT"


class ChangeEntry(BaseModel):
    """Represents one dependency's state before and after a commit.

    At least one of ``previous`` and ``current`` is always present. The
    change type is derived from the two sides and never stored.
    """

    previous: Optional[DependencyRecord] = None
    current: Optional[DependencyRecord] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_one_side(self) -> "ChangeEntry":
        if self.previous is None and self.current is None:
            raise ValueError("a change entry needs a previous or a current dependency")
        return self

    @computed_field
    @property
    def change_type(self) -> ChangeType:
        """Classify the change between ``previous`` and ``current``."""
        if self.previous is None:
            return ChangeType.ADDITION
        if self.current is None:
            return ChangeType.REMOVAL
        if self.previous == self.current:
            return ChangeType.NO_CHANGE
        if self.previous.is_same_library_in_different_version(self.current):
            return ChangeType.VERSION_CHANGE
        # Same key with only a scope change, or records paired from outside
        # the keyed diff.
        return ChangeType.REPLACEMENT

    def __str__(self) -> str:
        previous = str(self.previous) if self.previous else "-"
        current = str(self.current) if self.current else "-"
        return f"{self.change_type.value}: {previous} -> {current}"
