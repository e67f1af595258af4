"""Read commits and their diff-annotated changed files from a git repository."""

import logging
import re
from pathlib import Path, PurePosixPath
from typing import Iterator, List, Optional

import git
from git import Repo

from library_change.models.commit import ChangedArtifact, Commit

logger = logging.getLogger(__name__)

# Context wide enough that every unchanged line of a file ends up in its diff.
FULL_CONTEXT = 1_000_000


def diff_to_lines(patch: str) -> List[str]:
    """Turn a unified diff of one file into diff-annotated file lines.

    Hunk headers and ``\\ No newline at end of file`` markers are dropped.
    Anything before the first hunk (file headers, binary notices) is ignored.
    """
    lines = []
    in_hunk = False
    for line in patch.splitlines():
        if line.startswith("@@"):
            in_hunk = True
            continue
        if not in_hunk or line.startswith("\\"):
            continue
        if line.startswith(" "):
            line = line[1:]
        lines.append(line)
    return lines


class GitCommitSource:
    """Produces ``Commit`` models for the commits of a git repository."""

    def __init__(self, repo_path: Path, build_files: Optional["re.Pattern[str]"] = None):
        self.repo_path = Path(repo_path)
        self.build_files = build_files
        self._repo: Optional[Repo] = None

    @property
    def repo(self) -> Repo:
        """Get the git repository, opening it on first use."""
        if self._repo is None:
            self._repo = Repo(self.repo_path, search_parent_directories=True)
        return self._repo

    def iter_commits(self, rev: str = "HEAD", max_count: Optional[int] = None) -> Iterator[Commit]:
        """Yield commits reachable from ``rev``, newest first."""
        kwargs = {}
        if max_count is not None:
            kwargs["max_count"] = max_count
        for git_commit in self.repo.iter_commits(rev, **kwargs):
            yield self.to_commit(git_commit)

    def get_commit(self, rev: str) -> Commit:
        return self.to_commit(self.repo.commit(rev))

    def to_commit(self, git_commit: git.Commit) -> Commit:
        """Convert a GitPython commit, diffing it against its first parent."""
        if not git_commit.parents:
            # First commit - every file is new
            artifacts = [
                self._added_artifact(blob, self.wants_content(blob.path))
                for blob in git_commit.tree.traverse()
                if blob.type == "blob"
            ]
        else:
            diffs = git_commit.parents[0].diff(
                git_commit, create_patch=True, unified=FULL_CONTEXT
            )
            artifacts = [
                self._diff_artifact(item) for item in diffs if item.b_path or item.a_path
            ]

        logger.debug("Commit %s changed %d files", git_commit.hexsha, len(artifacts))
        return Commit(id=git_commit.hexsha, changed_artifacts=artifacts)

    def _diff_artifact(self, item: git.Diff) -> ChangedArtifact:
        path = item.b_path or item.a_path
        patch = item.diff if self.wants_content(path) else ""
        if isinstance(patch, bytes):
            patch = patch.decode("utf-8", errors="replace")
        return ChangedArtifact(
            name=PurePosixPath(path).name,
            path=path,
            content=diff_to_lines(patch or ""),
        )

    def wants_content(self, path: str) -> bool:
        """Whether the lines of ``path`` are needed by the build file selection."""
        return self.build_files is None or self.build_files.fullmatch(path.lower()) is not None

    @staticmethod
    def _added_artifact(blob: git.Blob, with_content: bool = True) -> ChangedArtifact:
        content = []
        if with_content:
            text = blob.data_stream.read().decode("utf-8", errors="replace")
            content = ["+" + line for line in text.splitlines()]
        return ChangedArtifact(name=blob.name, path=blob.path, content=content)
