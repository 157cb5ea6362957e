from __future__ import annotations

import pytest

from strap.config import StrapConfig
from strap.docs import EMPTY_DOCUMENTATION, DocumentationRecord
from strap.errors import UndocumentedError
from strap.help import (
    render_error,
    render_help,
    render_summaries,
    render_top_level_usage,
    render_usage,
    render_version,
)
from strap.lib.fonts import FONT_BOLD, FONT_CLEAR, FontStyle


def test_render_help_with_usage_and_help() -> None:
    record = DocumentationRecord(
        summary="Build it",
        usage="Usage: strap build [-f]",
        help="Builds the project.",
    )

    assert render_help("strap", "build", record) == (
        "Usage: strap build [-f]\n\nBuilds the project.\n"
    )


def test_render_help_synthesizes_usage_and_falls_back_to_summary() -> None:
    record = DocumentationRecord(summary="Build it")

    assert render_help("strap", "build", record) == (
        "Usage: strap build\n\nBuild it\n"
    )


def test_render_help_usage_only_has_no_help_section() -> None:
    record = DocumentationRecord(usage="Usage: strap build")

    assert render_help("strap", "build", record) == "Usage: strap build"


def test_render_help_undocumented_raises() -> None:
    with pytest.raises(UndocumentedError) as exc_info:
        render_help("strap", "build", EMPTY_DOCUMENTATION)

    assert exc_info.value.command == "build"
    assert "isn't documented" in str(exc_info.value)


def test_render_usage_is_empty_without_usage_block() -> None:
    assert render_usage(DocumentationRecord(summary="only summary")) == ""
    assert render_usage(EMPTY_DOCUMENTATION) == ""


def test_render_summaries_aligns_names_and_skips_undocumented() -> None:
    rows = render_summaries(
        [
            ("help", DocumentationRecord(summary="Display help")),
            ("secret", EMPTY_DOCUMENTATION),
            ("version", DocumentationRecord(summary="Show version")),
        ]
    )

    assert rows == [
        "   help        Display help",
        "   version     Show version",
    ]


def test_render_summaries_styles_names_when_enabled() -> None:
    rows = render_summaries(
        [("help", DocumentationRecord(summary="Display help"))],
        FontStyle(enabled=True),
    )

    assert rows == [f"   {FONT_BOLD}help     {FONT_CLEAR}   Display help"]


def test_render_top_level_usage_lists_builtin_summaries(config: StrapConfig) -> None:
    text = render_top_level_usage(config)

    lines = text.splitlines()
    assert lines[0] == "Usage: strap <command> [<args>]"
    assert "Some useful strap commands are:" in lines
    assert "   help        Display help for a command" in lines
    assert "   run         Run a command provided by an installed plugin" in lines
    assert "   version     Display the version of strap" in lines
    assert lines[-1] == "See 'strap help <command>' for information on a specific command."


def test_render_version(config: StrapConfig) -> None:
    assert render_version(config) == f"strap {config.version}"


def test_render_error_plain() -> None:
    assert render_error("strap", "no such command 'x'") == "strap: no such command 'x'"
