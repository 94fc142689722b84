from .blocks import CodeBlock
from .document import Document
from .fence import Fence
from .results import Report, Status, ValidationResult

__all__ = ["CodeBlock", "Document", "Fence", "Report", "Status", "ValidationResult"]
