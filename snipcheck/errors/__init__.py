from .base import SnipcheckError
from .config import ConfigError, ToolNotFound
from .extract import MalformedBlock
from .load import NotFound, ReadError
from .validate import ValidationCancelled, ValidationFailure, ValidationTimeout

__all__ = [
    "SnipcheckError",
    "ReadError",
    "NotFound",
    "MalformedBlock",
    "ConfigError",
    "ToolNotFound",
    "ValidationFailure",
    "ValidationTimeout",
    "ValidationCancelled",
]
