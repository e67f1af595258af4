"""Dependency record model."""

from pydantic import BaseModel


class DependencyRecord(BaseModel):
    """One dependency declared in a build file at one point in time."""

    scope: str
    group: str
    identifier: str
    version: str

    model_config = {"frozen": True}

    @property
    def key(self) -> str:
        """Identity of the library, independent of version and scope."""
        return f"{self.group}:{self.identifier}"

    @property
    def coordinates(self) -> str:
        return f"{self.group}:{self.identifier}:{self.version}"

    def is_same_library(self, other: "DependencyRecord") -> bool:
        return (
            other is not None
            and self.group == other.group
            and self.identifier == other.identifier
        )

    def is_same_library_in_same_version(self, other: "DependencyRecord") -> bool:
        return (
            self.is_same_library(other)
            and self.version == other.version
            and self.scope == other.scope
        )

    def is_same_library_in_different_version(self, other: "DependencyRecord") -> bool:
        return self.is_same_library(other) and self.version != other.version

    def __str__(self) -> str:
        return f"{self.scope} '{self.coordinates}'"
