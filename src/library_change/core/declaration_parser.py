"""Parse dependency declarations of the form ``scope 'group:identifier:version'``."""

import logging
import re
from typing import Iterable, List, Optional

from library_change.models.dependency import DependencyRecord

logger = logging.getLogger(__name__)

# The scope must start a word and segments exclude their own separators, so
# a failed match never backtracks across long runs of input.
DECLARATION = re.compile(
    r"(?<!\w)(?P<scope>\w+)\s+"
    r"'(?P<group>[^:\s']+):(?P<identifier>[^:\s']+):(?P<version>[^:\s']+)'"
)


def parse_declaration(line: str) -> Optional[DependencyRecord]:
    """Parse a single line, returning ``None`` when it declares nothing."""
    match = DECLARATION.search(line)
    if match is None:
        return None
    return DependencyRecord(
        scope=match.group("scope"),
        group=match.group("group"),
        identifier=match.group("identifier"),
        version=match.group("version"),
    )


def parse_declarations(block_lines: Iterable[str]) -> List[DependencyRecord]:
    """Parse every recognised declaration in ``block_lines``.

    Lines that are not single-quoted ``group:identifier:version`` literals
    (map-style or multi-line declarations, comments, blank lines) are
    skipped silently.
    """
    records = []
    for line in block_lines:
        record = parse_declaration(line)
        if record is None:
            if line.strip():
                logger.debug("Skipping unrecognised dependency line: %r", line)
            continue
        records.append(record)
    return records
