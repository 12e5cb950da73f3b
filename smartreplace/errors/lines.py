class LineRangeError(ValueError):
    """A 1-based line range does not fit the document."""
