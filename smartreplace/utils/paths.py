# smartreplace/utils/paths.py
import os
import re
from typing import List, Optional, Tuple

import pathspec

from ..errors.path import PathViolation
from .gitignore import is_ignored

_BARE_NAME_RE = re.compile(r"^[\w.\-]+$")


def is_bare_filename(file_path: str) -> bool:
    return bool(
        file_path
        and not os.path.isabs(file_path)
        and "/" not in file_path
        and "\\" not in file_path
        and _BARE_NAME_RE.match(file_path)
    )


def contained_path(root_real: str, file_path: str) -> str:
    """
    Resolve `file_path` against `root_real` and make sure it stays inside it.
    Absolute paths are accepted as long as they point inside the root.
    Raises PathViolation otherwise.
    """
    if os.path.isabs(file_path):
        target = file_path
    else:
        target = os.path.join(root_real, *file_path.replace("\\", "/").split("/"))
    resolved = os.path.realpath(target)
    if os.path.commonpath([root_real, resolved]) != root_real:
        raise PathViolation(f"Path escapes the workspace root: '{file_path}'")
    return resolved


def search_bare_filename(
    file_name: str,
    root_dir: str,
    spec: Optional[pathspec.PathSpec] = None,
) -> Tuple[List[str], List[str]]:
    """
    Walk `root_dir` for files named `file_name`, skipping .git and anything
    `spec` ignores. Returns (root-relative matches with '/' separators, log messages).
    """
    logs = [f"  - File '{file_name}' not found at root. Searching codebase..."]
    found: List[str] = []
    for cur, dirs, files in os.walk(root_dir):
        rel_dir = os.path.relpath(cur, root_dir)
        kept = []
        for d in dirs:
            if d == ".git":
                continue
            rel = d if rel_dir == "." else os.path.join(rel_dir, d)
            if spec is not None and is_ignored(spec, rel, is_dir=True):
                continue
            kept.append(d)
        dirs[:] = kept
        if file_name not in files:
            continue
        rel_file = os.path.relpath(os.path.join(cur, file_name), root_dir).replace(os.sep, "/")
        if spec is not None and is_ignored(spec, rel_file):
            continue
        found.append(rel_file)

    if len(found) == 1:
        logs.append(f"  - Found unique match: '{found[0]}'.")
    elif len(found) > 1:
        logs.append(f"  - WARNING: Found multiple files for '{file_name}': {found}. Refusing to guess.")
    return found, logs
