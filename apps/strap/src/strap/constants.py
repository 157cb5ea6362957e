"""Literal constants used by strap."""

APP_NAME = "strap"

COMMENT_MARKER = "#"
INTERPRETER_DIRECTIVE = "#!"
SUMMARY_TAG = "Summary:"
USAGE_TAG = "Usage:"

# Usage continuation lines must be indented at least this many spaces.
USAGE_CONTINUATION_INDENT = 7

MAX_SYMLINK_CHAIN = 64

BUILTIN_COMMANDS = ("help", "run", "version")

HELP_FLAGS = frozenset({"-h", "--help"})
VERSION_FLAGS = frozenset({"-v", "--version"})
USAGE_FLAG = "--usage"
COMPLETE_FLAG = "--complete"

LIB_DIR_NAME = "lib"
PLUGINS_DIR_NAME = "plugins"
CMD_DIR_NAME = "cmd"
USER_HOME_DIR_NAME = ".strap"

ENV_HOME = "STRAP_HOME"
ENV_LIB_DIR = "STRAP_LIB_DIR"
ENV_PLUGINS_DIR = "STRAP_PLUGINS_DIR"
ENV_CMD_DIR = "STRAP_CMD_DIR"
ENV_USER_HOME = "STRAP_USER_HOME"
ENV_DEBUG = "STRAP_DEBUG"
ENV_NO_COLOR = "NO_COLOR"

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})

SUMMARY_NAME_WIDTH = 9
