from .pool import validate_all
from .process import ToolOutput, run_tool
from .validator import SnippetValidator, build_argv

__all__ = ["SnippetValidator", "ToolOutput", "build_argv", "run_tool", "validate_all"]
