class PathViolation(ValueError):
    """A requested path resolves outside the root it must stay within."""
