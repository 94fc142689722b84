# snipcheck/validate/pool.py
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from ..models import ValidationResult
from ..normalize import Snippet
from .validator import SnippetValidator


def validate_all(
    snippets: Sequence[Snippet], validator: SnippetValidator, jobs: int = 1
) -> List[ValidationResult]:
    """
    Validate every snippet across at most `jobs` workers. Results come back
    in the order of `snippets`; completion order does not matter.
    """
    if not snippets:
        return []
    workers = max(1, min(jobs, len(snippets)))
    if workers == 1:
        return [validator.validate(s) for s in snippets]
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="snipcheck") as pool:
        futures = [pool.submit(validator.validate, s) for s in snippets]
        try:
            return [f.result() for f in futures]
        except BaseException:
            # Interrupted: stop queued work and kill running children.
            validator.cancel()
            for f in futures:
                f.cancel()
            raise
