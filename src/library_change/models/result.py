"""Analysis result models."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel

from .change import ChangeEntry, ChangeType


def _indent(text: str, prefix: str = "    ") -> str:
    return "\n".join(prefix + line if line else line for line in text.splitlines())


class BuildFileResult(BaseModel):
    """Classified dependency changes of one build file."""

    build_file_path: str
    changes: List[ChangeEntry] = []

    model_config = {"frozen": True}

    def changes_of_type(self, change_type: ChangeType) -> List[ChangeEntry]:
        return [change for change in self.changes if change.change_type == change_type]

    def __str__(self) -> str:
        lines = [f"Build file: {self.build_file_path}"]
        if self.changes:
            lines.extend(_indent(str(change)) for change in self.changes)
        else:
            lines.append(_indent("(no dependencies found)"))
        return "\n".join(lines)


class CommitResult(BaseModel):
    """All build file results of one commit."""

    commit_id: str
    file_results: List[BuildFileResult] = []

    model_config = {"frozen": True}

    def __str__(self) -> str:
        lines = [f"Commit: {self.commit_id}"]
        for file_result in self.file_results:
            lines.append(_indent(str(file_result)))
        return "\n".join(lines) + "\n"


class CommitStatus(str, Enum):
    """Outcome of analyzing one commit."""

    ANALYZED = "analyzed"
    SKIPPED = "skipped"
    FAILED = "failed"


class CommitOutcome(BaseModel):
    """What happened to a single commit during a run."""

    commit_id: str
    status: CommitStatus
    result: Optional[CommitResult] = None
    error: Optional[str] = None

    model_config = {"frozen": True}


class AnalysisReport(BaseModel):
    """Outcomes of a whole analysis run, in the order commits were consumed."""

    outcomes: List[CommitOutcome] = []

    model_config = {"frozen": True}

    @property
    def results(self) -> Dict[str, CommitResult]:
        return {
            outcome.commit_id: outcome.result
            for outcome in self.outcomes
            if outcome.status == CommitStatus.ANALYZED and outcome.result is not None
        }

    @property
    def successful(self) -> bool:
        """True when at least one commit was analyzed."""
        return any(outcome.status == CommitStatus.ANALYZED for outcome in self.outcomes)

    @property
    def failed(self) -> List[CommitOutcome]:
        return [o for o in self.outcomes if o.status == CommitStatus.FAILED]
