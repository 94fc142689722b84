"""
Logging policy for the checker.

Library code stays silent unless the caller opts in:

    from snipcheck._logging import resolve_logger

    def check_thing(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("checking thing")  # no-op unless enabled or logger passed

Only the command line installs a handler, via `configure_cli_logging`.
"""
from __future__ import annotations

import logging
import sys

CLI_FORMAT = "%(levelname)s %(name)s: %(message)s"


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """
    A passed `logger` wins; `enabled` yields the named stdlib logger at
    `level`, propagating to the root; otherwise a NoopLogger.
    """
    if logger is not None:
        return logger
    if not enabled:
        return NoopLogger()
    lg = logging.getLogger(name or "snipcheck")
    lg.setLevel(level)
    lg.propagate = True
    return lg


def configure_cli_logging(verbose: bool) -> None:
    """Send records to stderr: everything with `verbose`, warnings otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=CLI_FORMAT,
        stream=sys.stderr,
    )
