class CommitError(RuntimeError):
    """Writing computed content back to storage failed; the file is unchanged."""
