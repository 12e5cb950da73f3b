from __future__ import annotations


class ReplaceError(ValueError):
    """Base class for failures of the search-and-replace engine."""


class ValidationError(ReplaceError):
    """The caller supplied inputs that cannot describe an edit."""


class NotFoundError(ReplaceError):
    """No matching strategy could locate the target text."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "oldString not found in content. Re-read the file and resupply "
            "the exact text to replace."
        )


class AmbiguousError(ReplaceError):
    """The target text matched more than one location."""

    def __init__(self, count: int, strategy: str | None = None, message: str | None = None) -> None:
        self.count = count
        self.strategy = strategy
        super().__init__(
            message
            or f"Found {count} matches for oldString. Provide more surrounding "
            "context to identify the correct match, or use replace_all to "
            "change every occurrence."
        )
