# snipcheck/validate/process.py
import contextlib
import subprocess
import threading
import time
from dataclasses import dataclass
from typing import Iterator, List, Optional

from ..errors import ValidationCancelled, ValidationTimeout

# How often a running child is checked against the cancel flag.
POLL_INTERVAL = 0.05


@dataclass
class ToolOutput:
    returncode: int
    output: str


@contextlib.contextmanager
def spawned(argv: List[str], cwd: Optional[str] = None) -> Iterator[subprocess.Popen]:
    """
    Start `argv` and guarantee the child is killed and reaped when the
    block exits, whatever the exit path.
    """
    proc = subprocess.Popen(
        argv,
        cwd=cwd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    try:
        yield proc
    finally:
        if proc.poll() is None:
            proc.kill()
        for stream in (proc.stdout, proc.stderr):
            if stream is not None:
                stream.close()
        proc.wait()


def run_tool(
    argv: List[str],
    timeout: float,
    cwd: Optional[str] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ToolOutput:
    """
    Run `argv` to completion within `timeout` seconds and capture stdout and
    stderr verbatim.

    Raises ValidationTimeout when the limit is exceeded and
    ValidationCancelled when `cancel_event` is set while the child runs.
    """
    deadline = time.monotonic() + timeout
    with spawned(argv, cwd=cwd) as proc:
        while True:
            if cancel_event is not None and cancel_event.is_set():
                raise ValidationCancelled()
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise ValidationTimeout()
            try:
                out, err = proc.communicate(timeout=min(remaining, POLL_INTERVAL))
                break
            except subprocess.TimeoutExpired:
                continue
    output = out.decode("utf-8", errors="replace") + err.decode("utf-8", errors="replace")
    return ToolOutput(returncode=proc.returncode, output=output)
