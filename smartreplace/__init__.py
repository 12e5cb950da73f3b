from .apply import apply_resolution, replace_every, splice
from .edit import (
    FileHandle,
    InlineDispatcher,
    OperationReport,
    SerialDispatcher,
    edit_file_by_lines,
    edit_file_by_search,
    make_file_commit,
    make_file_finder,
    read_file_by_lines,
)
from .errors import (
    AmbiguousError,
    CommitError,
    LineRangeError,
    NotFoundError,
    PathViolation,
    ReplaceError,
    ValidationError,
)
from .lines import read_numbered, replace_line_range
from .match import STRATEGIES, Resolution, replace_with_resolution, resolve, smart_replace
from .utils.distance import levenshtein, similarity

__all__ = [
    "smart_replace",
    "replace_with_resolution",
    "resolve",
    "Resolution",
    "STRATEGIES",
    "splice",
    "replace_every",
    "apply_resolution",
    "levenshtein",
    "similarity",
    "read_numbered",
    "replace_line_range",
    "edit_file_by_search",
    "edit_file_by_lines",
    "read_file_by_lines",
    "make_file_finder",
    "make_file_commit",
    "FileHandle",
    "OperationReport",
    "InlineDispatcher",
    "SerialDispatcher",
    "ReplaceError",
    "ValidationError",
    "NotFoundError",
    "AmbiguousError",
    "CommitError",
    "LineRangeError",
    "PathViolation",
]
