# snipcheck/validate/validator.py
import os
import tempfile
import threading
from typing import List, Optional

from .._logging import resolve_logger
from ..errors import ValidationCancelled, ValidationFailure
from ..models import Status, ValidationResult
from ..normalize import Snippet
from ..system import write_tempfile
from .process import run_tool

FILE_PLACEHOLDER = "{file}"


def build_argv(command: List[str], snippet_path: str) -> List[str]:
    """`command` with `{file}` substituted, or the path appended."""
    if any(FILE_PLACEHOLDER in part for part in command):
        return [part.replace(FILE_PLACEHOLDER, snippet_path) for part in command]
    return list(command) + [snippet_path]


class SnippetValidator:
    """
    Hands normalized snippets to the collaborator tool, one process per call.

    Holds only read-only configuration, so one instance is shared by every
    worker thread.
    """

    def __init__(
        self,
        command: List[str],
        suffix: str = ".txt",
        timeout_ms: int = 5000,
        cancel_event: Optional[threading.Event] = None,
        logger=None,
        log: bool = False,
    ):
        self.command = list(command)
        self.suffix = suffix
        self.timeout = timeout_ms / 1000.0
        self.cancel_event = cancel_event or threading.Event()
        self.log = resolve_logger(logger=logger, enabled=log, name=__name__)

    def cancel(self) -> None:
        self.cancel_event.set()

    def _invoke(self, source: str) -> str:
        """Run the tool on `source`; returns its output or raises ValidationFailure."""
        with tempfile.TemporaryDirectory(prefix="snipcheck-") as workdir:
            path = write_tempfile(source, suffix=self.suffix, dir=workdir)
            argv = build_argv(self.command, os.path.basename(path))
            try:
                result = run_tool(
                    argv, self.timeout, cwd=workdir, cancel_event=self.cancel_event
                )
            except OSError as e:
                raise ValidationFailure(f"cannot run '{argv[0]}': {e.strerror or e}") from e
        if result.returncode != 0:
            raise ValidationFailure(result.output, returncode=result.returncode)
        return result.output

    def validate(self, snippet: Snippet) -> ValidationResult:
        block = snippet.block
        if snippet.skip_reason:
            return ValidationResult(
                block=block,
                status=Status.SKIPPED,
                diagnostic=f"Skipped: {snippet.skip_reason}",
                is_preamble=snippet.is_preamble,
            )
        try:
            if self.cancel_event.is_set():
                raise ValidationCancelled()
            output = self._invoke(snippet.source)
        except ValidationFailure as e:
            self.log.debug(f"lines {block.line_range}: failed ({e.diagnostic.strip()[:80]})")
            return ValidationResult(
                block=block,
                status=Status.FAILED,
                diagnostic=e.diagnostic,
                is_preamble=snippet.is_preamble,
            )
        self.log.debug(f"lines {block.line_range}: passed")
        return ValidationResult(
            block=block,
            status=Status.PASSED,
            diagnostic=output or None,
            is_preamble=snippet.is_preamble,
        )
