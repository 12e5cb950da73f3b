# conftest.py - shared fixtures
import pytest

from smartreplace.edit.types import FileHandle


class MemoryFiles:
    """In-memory stand-in for a host editor: a finder and a commit over a dict."""

    def __init__(self, files=None, directories=()):
        self.files = dict(files or {})
        self.directories = set(directories)
        self.commits = []

    def find(self, path):
        if path in self.directories:
            return FileHandle(path=path, is_directory=True)
        if path not in self.files:
            return None
        return FileHandle(path=path, reader=lambda: self.files[path])

    def commit(self, handle, new_text):
        self.commits.append((handle.path, new_text))
        self.files[handle.path] = new_text


@pytest.fixture
def memory_files():
    return MemoryFiles
