"""Build file analyzers and the dispatch choosing one per artifact."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from library_change.core.block_extractor import extract_block
from library_change.core.declaration_parser import parse_declarations
from library_change.core.diff_engine import diff
from library_change.core.diff_filter import DiffSide, reconstruct
from library_change.models.commit import ChangedArtifact
from library_change.models.result import BuildFileResult

logger = logging.getLogger(__name__)

GRADLE_BUILD_FILE = "build.gradle"
MAVEN_BUILD_FILE = "pom.xml"


class BuildFileAnalyzer(ABC):
    """Computes the dependency changes of one changed build file."""

    def __init__(self, artifact: ChangedArtifact):
        self.artifact = artifact

    @abstractmethod
    def analyze(self) -> BuildFileResult:
        """Analyze the artifact."""


class GradleBuildFileAnalyzer(BuildFileAnalyzer):
    """Analyzer for Groovy ``build.gradle`` files."""

    def dependencies(self, side: DiffSide):
        lines = reconstruct(self.artifact.content, side)
        return parse_declarations(extract_block(lines))

    def analyze(self) -> BuildFileResult:
        changes = diff(
            self.dependencies(DiffSide.BEFORE),
            self.dependencies(DiffSide.AFTER),
        )
        return BuildFileResult(build_file_path=self.artifact.path, changes=changes)


def create_build_file_analyzer(artifact: ChangedArtifact) -> Optional[BuildFileAnalyzer]:
    """Return the analyzer for the artifact's dialect, or ``None`` if there is none."""
    name = artifact.name.lower()
    if name == GRADLE_BUILD_FILE:
        return GradleBuildFileAnalyzer(artifact)
    if name == MAVEN_BUILD_FILE:
        logger.debug("Maven build files are not supported yet: %s", artifact.path)
    return None


def analyze_build_file(artifact: ChangedArtifact) -> Optional[BuildFileResult]:
    """Analyze one build file; ``None`` means no analyzer is available for it."""
    analyzer = create_build_file_analyzer(artifact)
    if analyzer is None:
        logger.debug("No analyzer available for %s", artifact.path)
        return None
    return analyzer.analyze()
