# smartreplace/edit/orchestrator.py
"""
Two-phase file edits: compute in memory, then commit through the host.

Read phase: snapshot the file and compute the new text. Nothing is written
if this fails. Commit phase: hand the text to the injected `commit`, run via
the dispatcher so document mutation stays on the host's mutation thread.
Every outcome comes back as an OperationReport; expected failures are never
raised to the caller.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from .._logging import resolve_logger
from ..errors.lines import LineRangeError
from ..errors.path import PathViolation
from ..errors.replace import ReplaceError
from ..lines import read_numbered, replace_line_range
from ..match.resolver import replace_with_resolution
from .dispatch import Dispatcher, InlineDispatcher
from .types import Commit, FileFinder, FileHandle, OperationReport, unified_diff

__all__ = ["edit_file_by_search", "edit_file_by_lines", "read_file_by_lines", "MAX_READ_BYTES"]

MAX_READ_BYTES = 1024 * 1024

# compute(original) -> (new_text, name of the strategy that matched, if any)
Compute = Callable[[str], Tuple[str, Optional[str]]]


def _locate(file_path: str, file_finder: FileFinder) -> Tuple[Optional[FileHandle], Optional[OperationReport]]:
    """Precondition checks shared by every file tool: the path must name an existing file."""
    try:
        handle = file_finder(file_path)
    except PathViolation as e:
        return None, OperationReport(False, str(e), path=file_path)
    except Exception as e:
        return None, OperationReport(False, f"Could not locate file: {e}", path=file_path)
    if handle is None:
        return None, OperationReport(False, "File not found", path=file_path)
    if handle.is_directory:
        return None, OperationReport(False, "Path is a directory, not a file", path=file_path)
    return handle, None


def _read(handle: FileHandle, file_path: str, log) -> Tuple[Optional[str], Optional[OperationReport]]:
    """Snapshot the file; any reader failure becomes a report instead of propagating."""
    try:
        return handle.read(), None
    except Exception as e:
        log.error(f"Could not read {handle.path}: {e}")
        return None, OperationReport(False, f"Could not read file [{handle.name}]: {e}", path=file_path)


def _run_edit(
    file_path: str,
    compute: Compute,
    *,
    mode: str,
    file_finder: FileFinder,
    commit: Commit,
    dispatcher: Optional[Dispatcher],
    log,
) -> OperationReport:
    handle, failure = _locate(file_path, file_finder)
    if failure is not None:
        log.warning(f"Precondition failed for {file_path}: {failure.message}")
        return failure

    # Phase 1: read and compute
    original, failure = _read(handle, file_path, log)
    if failure is not None:
        return failure
    try:
        new_text, strategy = compute(original)
    except (ReplaceError, LineRangeError) as e:
        log.info(f"Edit of {handle.name} rejected: {e}")
        return OperationReport(False, str(e), path=file_path)

    # Phase 2: commit on the mutation thread
    log.debug(f"Committing {len(new_text)} chars to {handle.path}")
    try:
        (dispatcher or InlineDispatcher()).invoke_and_wait(lambda: commit(handle, new_text))
    except Exception as e:
        log.error(f"Commit failed for {handle.path}: {e}")
        return OperationReport(False, f"Error while writing file: {e}", path=file_path)

    log.info(f"Updated {handle.path} ({len(original)} -> {len(new_text)} chars)")
    return OperationReport(
        True,
        f"File updated [{handle.name}]",
        path=file_path,
        original_length=len(original),
        new_length=len(new_text),
        mode=mode,
        strategy=strategy,
        diff=unified_diff(original, new_text, handle.name),
    )


def edit_file_by_search(
    file_path: str,
    old_string: str,
    new_string: str,
    replace_all: bool = False,
    *,
    file_finder: FileFinder,
    commit: Commit,
    dispatcher: Optional[Dispatcher] = None,
    logger=None,
    log: bool = False,
) -> OperationReport:
    """
    Replace the text `old_string` refers to in the file at `file_path`.

    Identical old/new strings, a missing path and a directory path are
    rejected before the file is read. Match failures (not found, ambiguous)
    and read errors abort before anything is written. Commit errors are
    reported with their message; the edit is not retried.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    log.info(f"Search-based edit requested for {file_path}")

    if old_string == new_string:
        return OperationReport(False, "oldString and newString must be different", path=file_path)

    def compute(original: str) -> Tuple[str, Optional[str]]:
        new_text, resolution = replace_with_resolution(
            original, old_string, new_string, replace_all, logger=log
        )
        return new_text, resolution.strategy

    return _run_edit(
        file_path,
        compute,
        mode="all" if replace_all else "single",
        file_finder=file_finder,
        commit=commit,
        dispatcher=dispatcher,
        log=log,
    )


def edit_file_by_lines(
    file_path: str,
    start_line: int,
    end_line: int,
    new_text: str,
    *,
    file_finder: FileFinder,
    commit: Commit,
    dispatcher: Optional[Dispatcher] = None,
    logger=None,
    log: bool = False,
) -> OperationReport:
    """Replace lines start_line..end_line (1-based, inclusive) of a file with `new_text`."""
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    log.info(f"Line edit requested for {file_path} ({start_line}-{end_line})")

    report = _run_edit(
        file_path,
        lambda original: (replace_line_range(original, start_line, end_line, new_text), None),
        mode="lines",
        file_finder=file_finder,
        commit=commit,
        dispatcher=dispatcher,
        log=log,
    )
    if report.success:
        report.message += f" (lines {start_line}-{end_line})"
    return report


def read_file_by_lines(
    file_path: str,
    start_line: Optional[int] = None,
    end_line: Optional[int] = None,
    *,
    file_finder: FileFinder,
    max_bytes: int = MAX_READ_BYTES,
    logger=None,
    log: bool = False,
) -> OperationReport:
    """
    Numbered view of a file, or of a 1-based inclusive slice of it, for the
    caller to quote from; the text is in `message`. Whole-file reads of files
    over `max_bytes` are refused.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    handle, failure = _locate(file_path, file_finder)
    if failure is not None:
        return failure
    content, failure = _read(handle, file_path, log)
    if failure is not None:
        return failure

    if start_line is None and end_line is None:
        size = len(content.encode(handle.encoding, errors="replace"))
        if size > max_bytes:
            return OperationReport(
                False,
                f"File too large ({size // 1024} KB); read a line range instead",
                path=file_path,
            )
    try:
        numbered = read_numbered(content, start_line, end_line)
    except LineRangeError as e:
        return OperationReport(False, str(e), path=file_path)
    return OperationReport(True, numbered, path=file_path, original_length=len(content), mode="read")
