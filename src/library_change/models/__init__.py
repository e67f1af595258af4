"""Data models for library-change."""

from .change import ChangeEntry, ChangeType
from .commit import ChangedArtifact, Commit
from .dependency import DependencyRecord
from .result import (
    AnalysisReport,
    BuildFileResult,
    CommitOutcome,
    CommitResult,
    CommitStatus,
)

__all__ = [
    "AnalysisReport",
    "BuildFileResult",
    "ChangeEntry",
    "ChangeType",
    "ChangedArtifact",
    "Commit",
    "CommitOutcome",
    "CommitResult",
    "CommitStatus",
    "DependencyRecord",
]
