from .base import SnipcheckError


class ConfigError(SnipcheckError):
    """Invalid option values or an unusable configuration."""


class ToolNotFound(ConfigError):
    """No collaborator command could be resolved for the subject language."""
