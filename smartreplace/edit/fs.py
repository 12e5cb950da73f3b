# smartreplace/edit/fs.py
"""
Plain-filesystem implementations of the orchestrator's collaborators.

    finder = make_file_finder("/path/to/repo")
    commit = make_file_commit(backup_ext=".bak")
    report = edit_file_by_search("src/app.py", old, new, file_finder=finder, commit=commit)
"""
from __future__ import annotations

import contextlib
import logging
import os
import shutil
import tempfile
from typing import Callable, Optional

from .._logging import resolve_logger
from ..errors.commit import CommitError
from ..utils.gitignore import get_gitignore
from ..utils.paths import contained_path, is_bare_filename, search_bare_filename
from .types import Commit, FileFinder, FileHandle

__all__ = ["make_file_finder", "make_file_commit"]


def _backup_path(dest: str, backup_ext: str) -> str:
    ext = backup_ext if backup_ext.startswith(".") else "." + backup_ext
    return dest + ext


def make_file_finder(
    root_dir: str,
    *,
    respect_gitignore: bool = True,
    encoding: str = "utf-8",
    logger=None,
    log: bool = False,
) -> FileFinder:
    """
    Build a file_finder rooted at `root_dir`.

    Paths are resolved relative to the root (absolute paths must point inside
    it, otherwise PathViolation). A bare filename that is not at the root is
    looked up in the tree, skipping .git and gitignored paths; it resolves
    only when exactly one file matches. Missing files resolve to None.
    """
    root_real = os.path.realpath(root_dir)
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    def find(file_path: str) -> Optional[FileHandle]:
        if not file_path:
            return None
        if is_bare_filename(file_path) and not os.path.exists(os.path.join(root_real, file_path)):
            spec = get_gitignore(root_real, logger=log) if respect_gitignore else None
            found, logs = search_bare_filename(file_path, root_real, spec)
            for msg in logs:
                log.debug(msg)
            if len(found) != 1:
                return None
            file_path = found[0]

        resolved = contained_path(root_real, file_path)
        if not os.path.exists(resolved):
            return None
        return FileHandle(path=resolved, is_directory=os.path.isdir(resolved), encoding=encoding)

    return find


def make_file_commit(
    *,
    atomic: bool = True,
    backup_ext: str | None = None,
    formatter: Optional[Callable[[str], None]] = None,
    encoding: str = "utf-8",
) -> Commit:
    """
    Build a commit that writes new text over a FileHandle's path.

    Args:
        atomic: stage into a same-directory temp file and promote it with
                os.replace(), so readers never observe a half-written file.
        backup_ext: when set (".bak" or "bak"), the previous content is copied
                    to `path + backup_ext` before the write.
        formatter: optional hook called with the path of the staged copy
                   (same directory and extension as the target) before it
                   replaces the target. It may rewrite that file in place.
        encoding: text encoding of the written file.

    Any failure, including a failing formatter, is raised as CommitError; the
    staged temp file is removed and the target keeps its previous content.
    """

    def commit(handle: FileHandle, new_text: str) -> None:
        dest = handle.path
        try:
            if backup_ext and os.path.exists(dest):
                shutil.copy2(dest, _backup_path(dest, backup_ext))
            if atomic:
                _write_atomic(dest, new_text, encoding, formatter)
            else:
                if formatter is not None:
                    new_text = _format_staged(dest, new_text, encoding, formatter)
                with open(dest, "w", encoding=encoding, newline="") as f:
                    f.write(new_text)
        except OSError as e:
            raise CommitError(f"Could not write '{dest}': {e}") from e

    return commit


def _stage(dest: str, text: str, encoding: str) -> str:
    dirpath = os.path.dirname(dest) or "."
    suffix = os.path.splitext(dest)[1] or ".tmp"
    fd, tmp = tempfile.mkstemp(prefix=".sr-", suffix=suffix, dir=dirpath)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(text)
    except BaseException:
        _discard(tmp)
        raise
    return tmp


def _discard(tmp: str) -> None:
    with contextlib.suppress(OSError):
        if os.path.exists(tmp):
            os.remove(tmp)


def _run_formatter(formatter: Callable[[str], None], staged: str, dest: str) -> None:
    try:
        formatter(staged)
    except Exception as e:
        raise CommitError(f"Formatter failed for '{dest}': {e}") from e


def _format_staged(dest: str, text: str, encoding: str, formatter: Callable[[str], None]) -> str:
    """Run `formatter` on a staged copy of `text` and return the formatted text."""
    tmp = _stage(dest, text, encoding)
    try:
        _run_formatter(formatter, tmp, dest)
        with open(tmp, "r", encoding=encoding, newline="") as f:
            return f.read()
    finally:
        _discard(tmp)


def _write_atomic(
    dest: str, text: str, encoding: str, formatter: Optional[Callable[[str], None]] = None
) -> None:
    tmp = _stage(dest, text, encoding)
    try:
        if formatter is not None:
            _run_formatter(formatter, tmp, dest)
        if os.path.exists(dest):
            shutil.copymode(dest, tmp)
        os.replace(tmp, dest)  # atomic within a filesystem
    except BaseException:
        _discard(tmp)
        raise
