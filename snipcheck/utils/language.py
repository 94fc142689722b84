# snipcheck/utils/language.py
from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple

from ..models import CodeBlock

# Fence tags that name the same subject language.
_ALIASES: Dict[str, str] = {
    "py": "python",
    "python3": "python",
    "js": "javascript",
    "node": "javascript",
    "sh": "bash",
    "shell": "bash",
    "rb": "ruby",
    "pl": "perl",
    "c++": "cpp",
    "cxx": "cpp",
    "ts": "typescript",
    "golang": "go",
    "rs": "rust",
    "ziglang": "zig",
}

# language -> (snippet file suffix, default collaborator command)
_TOOLS: Dict[str, Tuple[str, Optional[List[str]]]] = {
    "python": (".py", ["python3"]),
    "bash": (".sh", ["bash"]),
    "javascript": (".js", ["node"]),
    "typescript": (".ts", None),
    "ruby": (".rb", ["ruby"]),
    "perl": (".pl", ["perl"]),
    "lua": (".lua", ["lua"]),
    "php": (".php", ["php"]),
    "r": (".R", ["Rscript"]),
    "c": (".c", None),
    "cpp": (".cpp", None),
    "go": (".go", ["go", "run"]),
    "rust": (".rs", None),
    "java": (".java", ["java"]),
    "zig": (".zig", ["zig", "run"]),
}


def canonical_language(tag: str) -> str:
    """Map a fence tag to its canonical language name ("" stays "")."""
    tag = (tag or "").strip().lower()
    return _ALIASES.get(tag, tag)


def suffix_for(language: str) -> str:
    entry = _TOOLS.get(canonical_language(language))
    return entry[0] if entry else ".txt"


def default_command(language: str) -> Optional[List[str]]:
    entry = _TOOLS.get(canonical_language(language))
    if entry is None or entry[1] is None:
        return None
    return list(entry[1])


def infer_subject_language(blocks: Iterable[CodeBlock]) -> Optional[str]:
    """
    The dominant fence tag among `blocks`, ties broken by first appearance.
    Returns None when no block declares a language.
    """
    counts: Counter = Counter()
    first_seen: Dict[str, int] = {}
    for i, block in enumerate(blocks):
        lang = canonical_language(block.declared_language)
        if not lang:
            continue
        counts[lang] += 1
        first_seen.setdefault(lang, i)
    if not counts:
        return None
    return min(counts, key=lambda lang: (-counts[lang], first_seen[lang]))
