"""Commit models handed to the analyzer by a commit source."""

from typing import List

from pydantic import BaseModel


class ChangedArtifact(BaseModel):
    """A file changed by a commit.

    ``content`` holds the file as diff-annotated lines: context lines are
    plain text, added lines start with ``+`` and removed lines with ``-``.
    """

    name: str
    path: str
    content: List[str] = []

    model_config = {"frozen": True}


class Commit(BaseModel):
    """A commit and the artifacts it changed."""

    id: str
    changed_artifacts: List[ChangedArtifact] = []

    model_config = {"frozen": True}
