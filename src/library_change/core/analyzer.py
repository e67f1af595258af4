"""Commit-level library change analysis."""

import logging
from typing import Iterable, Iterator, Optional

from library_change.core.build_file import analyze_build_file
from library_change.core.config import AnalyzerConfig
from library_change.models.commit import ChangedArtifact, Commit
from library_change.models.result import (
    AnalysisReport,
    BuildFileResult,
    CommitOutcome,
    CommitResult,
    CommitStatus,
)

logger = logging.getLogger(__name__)


class LibraryChangeAnalyzer:
    """Analyzes the build files changed by commits.

    The analyzer keeps no per-commit state, so one instance can analyze
    commits from several threads at once.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()
        self._build_files = self.config.build_files_pattern()

    def is_build_file(self, artifact: ChangedArtifact) -> bool:
        return self._build_files.fullmatch(artifact.path.lower()) is not None

    def analyze_commit(self, commit: Commit) -> Optional[CommitResult]:
        """Analyze every build file of ``commit``.

        Returns ``None`` when the commit has no id. Artifacts that are not
        build files, or have no analyzer, contribute no result.
        """
        if not commit.id:
            return None

        file_results = []
        for artifact in commit.changed_artifacts:
            if not self.is_build_file(artifact):
                continue
            logger.debug("Processing %s from commit %s", artifact.path, commit.id)
            result: Optional[BuildFileResult] = analyze_build_file(artifact)
            if result is not None:
                file_results.append(result)

        return CommitResult(commit_id=commit.id, file_results=file_results)

    def iter_outcomes(self, commits: Iterable[Commit]) -> Iterator[CommitOutcome]:
        """Analyze commits one at a time as they are pulled from ``commits``."""
        for commit in commits:
            logger.debug("Analyzing commit %s", commit.id)
            try:
                result = self.analyze_commit(commit)
            except Exception as e:
                logger.exception("Could not analyze commit %s", commit.id)
                yield CommitOutcome(
                    commit_id=commit.id, status=CommitStatus.FAILED, error=str(e)
                )
                continue

            if result is None:
                logger.debug("Commit %r not analyzed: empty commit id", commit.id)
                yield CommitOutcome(commit_id=commit.id, status=CommitStatus.SKIPPED)
            else:
                logger.debug("Analysis of commit %s successful", commit.id)
                yield CommitOutcome(
                    commit_id=commit.id, status=CommitStatus.ANALYZED, result=result
                )

    def run(self, commits: Iterable[Commit]) -> AnalysisReport:
        """Analyze all ``commits`` and collect their outcomes."""
        return AnalysisReport(outcomes=list(self.iter_outcomes(commits)))
