"""Canonical path resolution through symbolic link chains.

Directories are the primitive: a directory is canonicalized by entering it
and reading the working directory back, which collapses `.`/`..` segments
and symlinked ancestors in one step. A file is canonicalized by
canonicalizing its parent directory and re-attaching the base name. If the
file itself is a symbolic link, its chain is followed until a non-link path
is reached.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from .constants import MAX_SYMLINK_CHAIN
from .errors import (
    InvalidPathError,
    PathNotFoundError,
    PathResolutionError,
    SymlinkLoopError,
)
from .lib.logging_utils import log_event

PathKind = Literal["dir", "file"]


def resolve(path: str | os.PathLike[str], *, expect: PathKind | None = None) -> Path:
    """Return the absolute, symlink-free form of an existing path.

    Args:
        path: File or directory path, absolute or relative to the working
            directory.
        expect: "dir" or "file" to require that kind of path, None for either.

    Returns:
        Canonical absolute path.

    Raises:
        PathNotFoundError: If the path (or the end of its symlink chain) does
            not exist.
        InvalidPathError: If the path is not of the expected kind.
        SymlinkLoopError: If the symlink chain is longer than MAX_SYMLINK_CHAIN.
    """
    raw = os.fspath(path)
    if raw == "":
        raise PathNotFoundError("Path is empty.")
    if "\0" in raw:
        raise InvalidPathError("Path contains NUL (\\0).")

    if os.path.isdir(raw):
        if expect == "file":
            raise InvalidPathError(f"Expected a file but found a directory: {raw}")
        resolved = resolve_directory(raw)
        log_event("path_resolved", path=raw, resolved=resolved, hops=0)
        return resolved

    if not os.path.lexists(raw):
        raise PathNotFoundError(f"No such file or directory: {raw}")
    if expect == "dir":
        raise InvalidPathError(f"Expected a directory but found a file: {raw}")

    current = _resolve_in_parent(raw)
    hops = 0
    while current.is_symlink():
        if hops >= MAX_SYMLINK_CHAIN:
            raise SymlinkLoopError(raw, MAX_SYMLINK_CHAIN)
        hops += 1
        target = os.readlink(current)
        if not os.path.isabs(target):
            target = os.path.join(current.parent, target)
        current = _resolve_in_parent(target)

    if current.is_dir():
        if expect == "file":
            raise InvalidPathError(
                f"Expected a file but the link resolves to a directory: {raw}"
            )
        current = resolve_directory(current)
    elif not current.exists():
        raise PathNotFoundError(f"Symbolic link target does not exist: {current}")

    log_event("path_resolved", path=raw, resolved=current, hops=hops)
    return current


def resolve_directory(path: str | os.PathLike[str]) -> Path:
    """Canonicalize an existing directory by entering it.

    The previous working directory is restored before returning. It is held
    open by descriptor, so it need not have a valid path (it may have been
    removed).
    """
    raw = os.fspath(path)
    if not os.path.isdir(raw):
        if os.path.lexists(raw) and not os.path.islink(raw):
            raise InvalidPathError(f"Expected a directory but found a file: {raw}")
        raise PathNotFoundError(f"No such directory: {raw}")

    previous = _open_working_directory()
    try:
        os.chdir(raw)
        return Path(os.getcwd())
    except OSError as exc:
        raise PathResolutionError(f"Cannot enter directory: {raw}") from exc
    finally:
        if previous is not None:
            try:
                os.fchdir(previous)
            finally:
                os.close(previous)


def resolve_file(path: str | os.PathLike[str]) -> Path:
    return resolve(path, expect="file")


def _open_working_directory() -> int | None:
    try:
        return os.open(os.curdir, os.O_RDONLY)
    except OSError as exc:
        log_event("cwd_unavailable", error=str(exc))
        return None


def _resolve_in_parent(raw: str) -> Path:
    """Canonicalize the parent directory of `raw` and re-attach its base name."""
    directory, name = os.path.split(raw)
    if name in ("", os.curdir, os.pardir):
        raise InvalidPathError(f"Path does not name a file: {raw}")
    return resolve_directory(directory or os.curdir) / name
