# smartreplace/utils/gitignore.py
import os
from typing import List

import pathspec

from .._logging import resolve_logger

_DEFAULT_PATTERNS: List[str] = [".git/"]


def get_gitignore(path: str, *, logger=None, log: bool = False) -> pathspec.PathSpec:
    """
    Compile the nearest .gitignore at or above `path` (a file or a directory).

    '.git/' is always ignored. A missing, unreadable or malformed .gitignore
    still yields a usable spec covering the defaults; the problem is reported
    only to an opted-in logger.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    lines: List[str] = list(_DEFAULT_PATTERNS)

    cur = os.path.abspath(path or ".")
    if os.path.isfile(cur):
        cur = os.path.dirname(cur)

    while True:
        candidate = os.path.join(cur, ".gitignore")
        if os.path.exists(candidate):
            try:
                with open(candidate, "r", encoding="utf-8", errors="ignore") as f:
                    lines.extend(f.read().splitlines())
                break
            except OSError as e:
                log.warning(f"Could not read {candidate}: {e}")
        parent = os.path.dirname(cur)
        if parent == cur:
            break
        cur = parent

    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except Exception as e:
        log.warning(f"Ignoring malformed .gitignore near {path}: {e}")
        return pathspec.PathSpec.from_lines("gitwildmatch", _DEFAULT_PATTERNS)


def is_ignored(spec: pathspec.PathSpec, rel_path: str, is_dir: bool = False) -> bool:
    """Match a root-relative path against `spec`; directories get a trailing '/'."""
    rel = rel_path.replace(os.sep, "/")
    if is_dir and not rel.endswith("/"):
        rel += "/"
    return spec.match_file(rel)
