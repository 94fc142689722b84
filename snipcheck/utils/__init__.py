# snipcheck/utils/__init__.py
from .discover import discover_documents, is_ignored, read_ignore_file
from .language import canonical_language, default_command, infer_subject_language, suffix_for

__all__ = [
    "canonical_language",
    "default_command",
    "discover_documents",
    "infer_subject_language",
    "is_ignored",
    "read_ignore_file",
    "suffix_for",
]
