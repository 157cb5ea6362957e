from __future__ import annotations

import io
from pathlib import Path

import pytest

from strap.builtins import help as help_command
from strap.builtins import run as run_command
from strap.builtins import version as version_command
from strap.config import StrapConfig
from test_helpers import write_command


def _help(args: list[str], config: StrapConfig) -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    exit_code = help_command.main(args, config=config, stdout=out, stderr=err)
    return exit_code, out.getvalue(), err.getvalue()


def test_help_prints_documentation(config: StrapConfig) -> None:
    exit_code, out, err = _help(["help"], config)

    assert exit_code == 0
    assert out == (
        "Usage: strap help [--usage] COMMAND\n"
        "\n"
        "Parses and displays help contents from a command's source file.\n"
        "\n"
    )
    assert err == ""


def test_help_synthesizes_usage_for_summary_only_command(config: StrapConfig) -> None:
    exit_code, out, _ = _help(["version"], config)

    assert exit_code == 0
    assert out == "Usage: strap version\n\nDisplay the version of strap\n\n"


def test_help_undocumented_command_fails_without_stdout(config: StrapConfig) -> None:
    write_command(config.cmd_dir, "quiet", "#!/bin/sh\n# just a comment\nexit 0\n")

    exit_code, out, err = _help(["quiet"], config)

    assert exit_code == 1
    assert out == ""
    assert err == "Sorry, this command isn't documented yet.\n"


def test_help_usage_for_undocumented_command_succeeds_silently(
    config: StrapConfig,
) -> None:
    write_command(config.cmd_dir, "quiet", "exit 0\n")

    assert _help(["--usage", "quiet"], config) == (0, "", "")


def test_help_usage_prints_usage_block(config: StrapConfig) -> None:
    exit_code, out, _ = _help(["--usage", "run"], config)

    assert exit_code == 0
    assert out == "Usage: strap run PLUGIN COMMAND [ARGS...]\n"


def test_help_unknown_command(config: StrapConfig) -> None:
    exit_code, out, err = _help(["nope"], config)

    assert exit_code == 1
    assert out == ""
    assert err == "strap: no such command 'nope'\n"


def test_help_usage_unknown_command_fails_closed(config: StrapConfig) -> None:
    exit_code, _, err = _help(["--usage", "nope"], config)

    assert exit_code == 1
    assert "no such command 'nope'" in err


def test_help_without_command_prints_top_level_usage(config: StrapConfig) -> None:
    exit_code, out, _ = _help([], config)

    assert exit_code == 0
    assert out.startswith("Usage: strap <command> [<args>]\n\nSome useful strap commands are:\n")


def test_help_complete_lists_commands(config: StrapConfig) -> None:
    write_command(config.plugins_dir / "p" / "cmd", "extra", "echo\n")

    exit_code, out, _ = _help(["--complete"], config)

    assert exit_code == 0
    assert out.splitlines() == ["extra", "help", "run", "version"]


def test_help_reads_configuration_from_environment(
    strap_env: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = help_command.main(["--usage", "help"])

    assert exit_code == 0
    assert capsys.readouterr().out == "Usage: strap help [--usage] COMMAND\n"


def test_version_prints_version(config: StrapConfig) -> None:
    out = io.StringIO()

    assert version_command.main([], config=config, stdout=out) == 0
    assert out.getvalue() == f"strap {config.version}\n"


def test_run_executes_plugin_command(config: StrapConfig, tmp_path: Path) -> None:
    marker = tmp_path / "marker"
    write_command(
        config.plugins_dir / "brew" / "cmd",
        "install",
        f'#!/bin/sh\nprintf "%s" "$1" > "{marker}"\nexit 4\n',
    )

    exit_code = run_command.main(["brew", "install", "git"], config=config)

    assert exit_code == 4
    assert marker.read_text(encoding="utf-8") == "git"


def test_run_unknown_plugin(config: StrapConfig) -> None:
    err = io.StringIO()

    assert run_command.main(["missing", "x"], config=config, stderr=err) == 1
    assert err.getvalue() == "strap: no such plugin 'missing'\n"


def test_run_unknown_plugin_command(config: StrapConfig) -> None:
    (config.plugins_dir / "brew" / "cmd").mkdir(parents=True)
    err = io.StringIO()

    assert run_command.main(["brew", "x"], config=config, stderr=err) == 1
    assert err.getvalue() == "strap: no such command 'x' in plugin 'brew'\n"


def test_run_requires_plugin_and_command(config: StrapConfig) -> None:
    err = io.StringIO()

    assert run_command.main(["brew"], config=config, stderr=err) == 1
    assert err.getvalue().startswith("Usage: strap run PLUGIN COMMAND")
