from .commit import CommitError
from .lines import LineRangeError
from .path import PathViolation
from .replace import AmbiguousError, NotFoundError, ReplaceError, ValidationError

__all__ = [
    "ReplaceError",
    "ValidationError",
    "NotFoundError",
    "AmbiguousError",
    "CommitError",
    "LineRangeError",
    "PathViolation",
]
