class SnipcheckError(Exception):
    """Base class for every error raised by the checker."""
