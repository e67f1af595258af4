"""Isolate the interior of ``dependencies { ... }`` blocks in a build file."""

import re
from typing import Iterable, List

# A header added or removed by the commit still carries its diff marker.
BLOCK_START = re.compile(r"[+-]?\s*dependencies\s*\{\s*$")


def extract_block(lines: Iterable[str]) -> List[str]:
    """Return the interior lines of every dependency block, in order.

    The header line is not part of the output, and neither is the brace
    closing the block nor anything following it on that line. Nested braces
    are kept. Each line scanned inside a block yields exactly one (possibly
    empty) output line. Several blocks in one file are concatenated.

    Unbalanced input never raises: if the block is not closed, every line
    up to the end of input is emitted.
    """
    depth = 0
    interior: List[str] = []

    for line in lines:
        if depth == 0:
            if BLOCK_START.match(line):
                depth = 1
            continue

        buffer = []
        for char in line:
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    break
            buffer.append(char)
        interior.append("".join(buffer))

    return interior
