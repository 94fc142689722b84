from .base import SnipcheckError


class ValidationFailure(SnipcheckError):
    """A snippet was rejected by the collaborator tool."""

    def __init__(self, diagnostic: str, returncode: int | None = None):
        super().__init__(diagnostic)
        self.diagnostic = diagnostic
        self.returncode = returncode


class ValidationTimeout(ValidationFailure):
    """The collaborator tool exceeded the wall-clock limit."""

    def __init__(self):
        super().__init__("timeout")


class ValidationCancelled(ValidationFailure):
    """The run was cancelled before or during the invocation."""

    def __init__(self):
        super().__init__("cancelled")
