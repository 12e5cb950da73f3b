# smartreplace/edit/types.py
from __future__ import annotations

import difflib
import os
from dataclasses import dataclass
from typing import Callable, Optional

__all__ = ["FileHandle", "OperationReport", "FileFinder", "Commit", "unified_diff"]


@dataclass
class FileHandle:
    """A file as seen by the edit tools: where it is and how to read it."""

    path: str
    is_directory: bool = False
    encoding: str = "utf-8"
    # Host-supplied reader (e.g. an open editor buffer); defaults to the file on disk.
    reader: Optional[Callable[[], str]] = None

    @property
    def name(self) -> str:
        return os.path.basename(self.path.rstrip("/\\")) or self.path

    def read(self) -> str:
        if self.reader is not None:
            return self.reader()
        # newline="" keeps CRLF/CR endings exactly as stored.
        with open(self.path, "r", encoding=self.encoding, newline="") as f:
            return f.read()


FileFinder = Callable[[str], Optional[FileHandle]]
Commit = Callable[[FileHandle, str], None]


@dataclass
class OperationReport:
    """Outcome of one edit tool call, renderable as a Markdown tool result."""

    success: bool
    message: str
    path: str = ""
    original_length: Optional[int] = None
    new_length: Optional[int] = None
    mode: Optional[str] = None  # "single", "all", "lines", "read"
    strategy: Optional[str] = None
    diff: Optional[str] = None

    def __str__(self) -> str:
        if self.success and self.mode == "read":
            return self.message
        if not self.success:
            out = f"### Failed: {self.message}"
            if self.path:
                out += f"\nPath: `{self.path}`"
            return out
        out = f"### Success: {self.message}"
        if self.original_length is not None:
            out += f"\n- Original length: {self.original_length} chars"
        if self.new_length is not None:
            out += f"\n- New length: {self.new_length} chars"
        if self.mode:
            out += f"\n- Mode: {_MODE_LABELS.get(self.mode, self.mode)}"
        if self.strategy:
            out += f"\n- Matched by: {self.strategy}"
        out += "\nCheck the file for errors before continuing."
        return out


_MODE_LABELS = {
    "single": "single replacement",
    "all": "replace all occurrences",
    "lines": "line range replacement",
}


def unified_diff(old: str, new: str, path: str = "file") -> str:
    return "".join(
        difflib.unified_diff(
            old.splitlines(keepends=True),
            new.splitlines(keepends=True),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
        )
    )
