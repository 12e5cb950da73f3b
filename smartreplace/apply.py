# smartreplace/apply.py
from __future__ import annotations

from typing import TYPE_CHECKING

from .errors.replace import AmbiguousError, NotFoundError

if TYPE_CHECKING:
    from .match.resolver import Resolution

__all__ = ["splice", "replace_every", "apply_resolution"]


def splice(content: str, start: int, matched_text: str, replacement: str) -> str:
    """Swap content[start:start+len(matched_text)] for `replacement`; everything else is untouched."""
    return content[:start] + replacement + content[start + len(matched_text):]


def replace_every(content: str, matched_text: str, replacement: str) -> str:
    """Replace every literal occurrence of `matched_text`."""
    return content.replace(matched_text, replacement)


def apply_resolution(content: str, resolution: "Resolution", replacement: str) -> str:
    """Splice a unique resolution into `content`; other outcomes raise."""
    if resolution.status == "not_found":
        raise NotFoundError()
    if resolution.status == "ambiguous":
        raise AmbiguousError(resolution.occurrences, resolution.strategy)
    return splice(content, resolution.start, resolution.matched_text, replacement)
