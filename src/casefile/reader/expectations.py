# Copyright 2026 CaseFile Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reader for the comment-prefixed expectations block at the end of a test case."""

from __future__ import annotations

from collections.abc import Iterable

from casefile.errors import FormatError

# ###############
# Public Interface
# ###############

COMMENT = "//"


def parse_simple_expectations(lines: Iterable[str], first_line: int | None = None) -> str:
    """Recover the expected output from the remaining lines of a test case.

    Each line must be ``// text`` (contributing ``text``) or exactly ``//``
    (contributing an empty line).

    Args:
        lines: The remaining lines, with or without trailing newlines.
        first_line: Line number of the first line, used in error messages.

    Returns:
        The expected output, one newline-terminated line per input line.

    Raises:
        FormatError: If a line is not comment-prefixed.
    """
    result: list[str] = []
    for offset, raw in enumerate(lines):
        line = raw.removesuffix("\n")
        if line.startswith(COMMENT + " "):
            result.append(line[len(COMMENT) + 1 :] + "\n")
        elif line == COMMENT:
            result.append("\n")
        else:
            line_number = first_line + offset if first_line is not None else None
            raise FormatError('Test expectations must start with "// ".', line_number)
    return "".join(result)
