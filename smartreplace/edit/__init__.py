from .dispatch import Dispatcher, InlineDispatcher, SerialDispatcher
from .fs import make_file_commit, make_file_finder
from .orchestrator import MAX_READ_BYTES, edit_file_by_lines, edit_file_by_search, read_file_by_lines
from .types import FileHandle, OperationReport

__all__ = [
    "edit_file_by_search",
    "edit_file_by_lines",
    "read_file_by_lines",
    "make_file_finder",
    "make_file_commit",
    "FileHandle",
    "OperationReport",
    "Dispatcher",
    "InlineDispatcher",
    "SerialDispatcher",
    "MAX_READ_BYTES",
]
