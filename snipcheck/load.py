# snipcheck/load.py
import os

from .errors import NotFound, ReadError
from .models import Document


def parse_document(text: str, path: str = "<string>") -> Document:
    """Split in-memory text into a Document. Terminators are dropped."""
    if text.startswith("\ufeff"):
        text = text[1:]
    return Document(path=path, lines=tuple(text.splitlines()))


def load_document(path: str) -> Document:
    """
    Read a UTF-8 document from disk.

    Raises NotFound when `path` is missing or not a regular file and ReadError
    for any other I/O or decoding failure.
    """
    if not os.path.isfile(path):
        raise NotFound(path)
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ReadError(path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e
    return parse_document(text, path=path)
