"""Persist analysis results as one text file per commit."""

import logging
from pathlib import Path
from typing import List

from library_change.models.result import AnalysisReport

logger = logging.getLogger(__name__)

RESULT_SUFFIX = ".changedlibs.result"


def result_path(output_dir: Path, commit_id: str) -> Path:
    return Path(output_dir) / f"{commit_id}{RESULT_SUFFIX}"


def write_results(report: AnalysisReport, output_dir: Path) -> List[Path]:
    """Append each analyzed commit's result to ``<commit id>.changedlibs.result``.

    A commit whose file cannot be written is logged and skipped.
    """
    output_dir = Path(output_dir)
    written = []
    for commit_id, result in report.results.items():
        target = result_path(output_dir, commit_id)
        try:
            with open(target, "a", encoding="utf-8") as f:
                f.write(str(result))
        except OSError as e:
            logger.error("Could not write result for commit %s to %s: %s", commit_id, target, e)
            continue
        written.append(target)
    return written
