from .annotations import KNOWN_ANNOTATIONS, parse_info_string
from .fences import parse_fence
from .main import BlockSequence, count_fence_pairs, extract_blocks, extract_blocks_from_text

__all__ = [
    "BlockSequence",
    "count_fence_pairs",
    "extract_blocks",
    "extract_blocks_from_text",
    "parse_fence",
    "parse_info_string",
    "KNOWN_ANNOTATIONS",
]
