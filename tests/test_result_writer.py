"""Tests for persisting results."""

from library_change.core.result_writer import result_path, write_results
from library_change.models.change import ChangeEntry
from library_change.models.dependency import DependencyRecord
from library_change.models.result import (
    AnalysisReport,
    BuildFileResult,
    CommitOutcome,
    CommitResult,
    CommitStatus,
)


def make_report():
    record = DependencyRecord(scope="api", group="a", identifier="b", version="1")
    result = CommitResult(
        commit_id="abc",
        file_results=[
            BuildFileResult(build_file_path="build.gradle", changes=[ChangeEntry(current=record)])
        ],
    )
    return AnalysisReport(
        outcomes=[
            CommitOutcome(commit_id="abc", status=CommitStatus.ANALYZED, result=result),
            CommitOutcome(commit_id="def", status=CommitStatus.FAILED, error="boom"),
        ]
    )


def test_one_file_per_analyzed_commit(tmp_path):
    """Test that only analyzed commits are written."""
    written = write_results(make_report(), tmp_path)
    assert written == [tmp_path / "abc.changedlibs.result"]
    text = written[0].read_text()
    assert "Commit: abc" in text
    assert "ADDITION: - -> api 'a:b:1'" in text


def test_existing_file_is_appended(tmp_path):
    """Test that writing twice appends to the result file."""
    write_results(make_report(), tmp_path)
    write_results(make_report(), tmp_path)
    assert result_path(tmp_path, "abc").read_text().count("Commit: abc") == 2


def test_unwritable_target_is_skipped(tmp_path, caplog):
    """Test that a write failure is logged instead of raised."""
    (tmp_path / "abc.changedlibs.result").mkdir()
    assert write_results(make_report(), tmp_path) == []
    assert "Could not write result for commit abc" in caplog.text
