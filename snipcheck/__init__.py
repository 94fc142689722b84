from .config import CheckConfig
from .core import check_document, check_text
from .errors import (
    ConfigError,
    MalformedBlock,
    NotFound,
    ReadError,
    SnipcheckError,
    ToolNotFound,
    ValidationFailure,
    ValidationTimeout,
)
from .extract import count_fence_pairs, extract_blocks, extract_blocks_from_text
from .load import load_document, parse_document
from .models import CodeBlock, Document, Report, Status, ValidationResult
from .normalize import find_preamble, normalize_snippet, plan_snippets
from .report import build_report, exit_code, render_report, render_summary
from .validate import SnippetValidator, validate_all

__all__ = [
    "CheckConfig",
    "check_document",
    "check_text",
    "load_document",
    "parse_document",
    "extract_blocks",
    "extract_blocks_from_text",
    "count_fence_pairs",
    "find_preamble",
    "normalize_snippet",
    "plan_snippets",
    "SnippetValidator",
    "validate_all",
    "build_report",
    "render_report",
    "render_summary",
    "exit_code",
    "CodeBlock",
    "Document",
    "Report",
    "Status",
    "ValidationResult",
    "SnipcheckError",
    "ReadError",
    "NotFound",
    "MalformedBlock",
    "ConfigError",
    "ToolNotFound",
    "ValidationFailure",
    "ValidationTimeout",
]
