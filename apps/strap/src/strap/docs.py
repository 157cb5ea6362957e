"""Command documentation extraction.

A command documents itself with a comment block at the very top of its
source:

    #!/usr/bin/env bash
    # Summary: Build the project
    # Usage: strap build [-f]
    #        strap build --clean
    #
    # Builds the project in the current directory.

`Summary:` gives the one-line summary, `Usage:` starts a usage block that
continues over blank lines and lines indented by at least seven spaces, and
every other line is extended help text.
"""

from __future__ import annotations

import enum
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .constants import (
    COMMENT_MARKER,
    INTERPRETER_DIRECTIVE,
    SUMMARY_TAG,
    USAGE_CONTINUATION_INDENT,
    USAGE_TAG,
)
from .lib.logging_utils import log_event


@dataclass(frozen=True)
class DocumentationRecord:
    summary: str = ""
    usage: str = ""
    help: str = ""

    @property
    def is_absent(self) -> bool:
        """True when the command has neither a summary nor a usage block."""
        return not self.summary and not self.usage

    @property
    def help_text(self) -> str:
        """Extended help, falling back to the summary."""
        return self.help or self.summary


EMPTY_DOCUMENTATION = DocumentationRecord()


class ParseState(enum.Enum):
    NORMAL = "normal"
    IN_USAGE = "in_usage"


def extract_comment_block(source_text: str) -> Iterator[str]:
    """Yield the leading comment lines of `source_text` with markers stripped.

    Scanning stops at the first line that is not a comment. One marker and at
    most one following space are removed, and a bare marker yields a single
    space. An interpreter directive (`#!...`) on the first line is skipped.
    """
    for index, line in enumerate(source_text.splitlines()):
        if not line.startswith(COMMENT_MARKER):
            return
        if index == 0 and line.startswith(INTERPRETER_DIRECTIVE):
            continue
        body = line[len(COMMENT_MARKER):]
        if body.startswith(" "):
            body = body[1:]
        elif not body:
            body = " "
        yield body


def parse_documentation(comment_lines: Iterable[str]) -> DocumentationRecord:
    """Classify comment lines into summary, usage and help.

    Returns EMPTY_DOCUMENTATION when neither a summary nor a usage block is
    present.
    """
    summary = ""
    usage_lines: list[str] = []
    help_lines: list[str] = []
    state = ParseState.NORMAL

    for line in comment_lines:
        if line.startswith(SUMMARY_TAG):
            summary = _strip_one_space(line[len(SUMMARY_TAG):])
            state = ParseState.NORMAL
        elif line.startswith(USAGE_TAG):
            usage_lines.append(line)
            state = ParseState.IN_USAGE
        elif state is ParseState.IN_USAGE and is_usage_continuation(line):
            usage_lines.append(line)
        else:
            state = ParseState.NORMAL
            help_lines.append(line)

    usage = _join_trimmed(usage_lines)
    if not usage and not summary:
        return EMPTY_DOCUMENTATION

    return DocumentationRecord(
        summary=summary,
        usage=usage,
        help=_join_trimmed(help_lines),
    )


def is_usage_continuation(line: str) -> bool:
    """Blank lines and lines indented seven or more spaces continue a usage block."""
    return line.strip(" ") == "" or line.startswith(" " * USAGE_CONTINUATION_INDENT)


def documentation_for(path: str | os.PathLike[str]) -> DocumentationRecord:
    """Read and parse the documentation of the command file at `path`.

    An unreadable file is treated as undocumented.
    """
    try:
        source_text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        log_event("doc_read_error", path=path, error=str(exc))
        return EMPTY_DOCUMENTATION
    return parse_documentation(extract_comment_block(source_text))


def _strip_one_space(text: str) -> str:
    return text[1:] if text.startswith(" ") else text


def _join_trimmed(lines: list[str]) -> str:
    """Join lines, dropping leading and trailing blank lines."""
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end])
