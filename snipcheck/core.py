# snipcheck/core.py
import logging
import threading
from typing import List, Optional, Union

from ._logging import resolve_logger
from .config import CheckConfig
from .extract import extract_blocks
from .load import load_document, parse_document
from .models import Document, Report, ValidationResult
from .normalize import plan_snippets
from .report import build_report
from .utils.language import infer_subject_language, suffix_for
from .validate import SnippetValidator, validate_all


def check_document(
    source: Union[str, Document],
    config: Optional[CheckConfig] = None,
    cancel_event: Optional[threading.Event] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> Report:
    """
    Run the whole pipeline on one document: load, extract, normalize,
    validate and report.

    `source` is a path or an already loaded Document. ReadError,
    MalformedBlock and ToolNotFound propagate; per-snippet failures are
    recorded in the returned Report.
    """
    config = (config or CheckConfig()).validate()
    lg = resolve_logger(logger=logger, enabled=log or config.verbose, name=__name__)

    document = source if isinstance(source, Document) else load_document(source)
    # Materialise up front so a malformed document fails before any tool runs.
    blocks = list(extract_blocks(document, logger=logger, log=log or config.verbose))
    lg.debug(f"{document.path}: {len(blocks)} fenced block(s)")

    language = config.language or infer_subject_language(blocks)
    snippets, ignored = plan_snippets(
        blocks, language, implicit_preamble=config.implicit_preamble
    )

    results: List[ValidationResult] = []
    if snippets:
        runnable = [s for s in snippets if not s.skip_reason]
        command = config.resolve_command(language) if runnable else []
        lg.info(
            f"{document.path}: validating {len(runnable)} {language} snippet(s) "
            f"with {' '.join(command) or '-'} (jobs={config.jobs}, timeout={config.timeout_ms}ms)"
        )
        validator = SnippetValidator(
            command,
            suffix=suffix_for(language),
            timeout_ms=config.timeout_ms,
            cancel_event=cancel_event,
            logger=logger,
            log=log or config.verbose,
        )
        results = validate_all(snippets, validator, jobs=config.jobs)

    return build_report(document.path, language, results, ignored=ignored)


def check_text(
    markdown_content: str,
    config: Optional[CheckConfig] = None,
    path: str = "<string>",
    **kwargs,
) -> Report:
    """check_document for in-memory markdown."""
    return check_document(parse_document(markdown_content, path=path), config, **kwargs)
