class VimeUtilsError(RuntimeError):
    """Base exception for vime-utils errors."""
