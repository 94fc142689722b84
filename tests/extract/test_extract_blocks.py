import textwrap

import pytest

from snipcheck.errors import MalformedBlock
from snipcheck.extract import count_fence_pairs, extract_blocks, extract_blocks_from_text
from snipcheck.load import parse_document


TUTORIAL = textwrap.dedent(
    """\
    # Learn C in Y minutes

    Every snippet assumes this:

    ```c
    #include <stdio.h>
    ```

    Grammar, not code:

    ```
    expr := term | expr '+' term
    ```

    ```C
    int main(void) {
        return 0;
    }
    ```
    """
)


def test_extracts_blocks_with_line_ranges():
    blocks = extract_blocks_from_text(TUTORIAL)
    assert [(b.start_line, b.end_line) for b in blocks] == [(5, 7), (11, 13), (15, 19)]
    assert [b.declared_language for b in blocks] == ["c", "", "c"]
    assert blocks[0].raw_text == "#include <stdio.h>"
    assert blocks[2].raw_text == "int main(void) {\n    return 0;\n}"


def test_untagged_block_has_empty_language():
    blocks = extract_blocks_from_text(TUTORIAL)
    assert blocks[1].declared_language == ""
    assert not blocks[1].is_tagged
    assert blocks[1].raw_text == "expr := term | expr '+' term"


def test_sequence_is_lazy_and_restartable():
    doc = parse_document(TUTORIAL)
    seq = extract_blocks(doc)
    first = list(seq)
    second = list(seq)
    assert first == second
    assert len(first) == 3


def test_block_count_matches_fence_pairs():
    doc = parse_document(TUTORIAL)
    assert count_fence_pairs(doc) == 3


def test_empty_block():
    blocks = extract_blocks_from_text("```python\n```\n")
    assert len(blocks) == 1
    assert blocks[0].raw_text == ""
    assert (blocks[0].start_line, blocks[0].end_line) == (1, 2)


def test_document_without_fences():
    assert extract_blocks_from_text("# Title\n\nJust prose.\n") == []
    assert extract_blocks_from_text("") == []


def test_unterminated_fence_reports_opening_line():
    text = "intro\n\n```python\nx = 1\n```\n\n```c\nint x;\n"
    with pytest.raises(MalformedBlock) as exc:
        extract_blocks_from_text(text)
    assert exc.value.line == 7
    assert "7" in str(exc.value)


def test_malformed_error_raised_only_when_iteration_reaches_it():
    doc = parse_document("```python\nx = 1\n```\n```c\n")
    it = iter(extract_blocks(doc))
    assert next(it).raw_text == "x = 1"
    with pytest.raises(MalformedBlock):
        next(it)


def test_nested_fences_are_not_supported():
    # The bare fence closes the open block; the tagged line is content.
    text = "```md\n```python\nx = 1\n```\ntail\n"
    blocks = extract_blocks_from_text(text)
    assert len(blocks) == 1
    assert blocks[0].declared_language == "md"
    assert blocks[0].raw_text == "```python\nx = 1"


def test_tagged_fence_inside_block_does_not_close_it():
    with pytest.raises(MalformedBlock) as exc:
        extract_blocks_from_text("```python\nx = 1\n```python\n")
    assert exc.value.line == 1


def test_longer_opener_needs_longer_closer():
    text = "````md\n```\ninner\n````\n"
    blocks = extract_blocks_from_text(text)
    assert len(blocks) == 1
    assert blocks[0].raw_text == "```\ninner"


def test_inline_triple_backticks_are_not_fences():
    blocks = extract_blocks_from_text("```not a fence``` here\n```sh\necho hi\n```\n")
    assert [b.declared_language for b in blocks] == ["sh"]


def test_indented_fence_strips_opener_indent():
    text = "1. Install:\n   ```sh\n   make\n     install\n   ```\n"
    blocks = extract_blocks_from_text(text)
    assert blocks[0].raw_text == "make\n  install"


def test_ranges_never_overlap_and_stay_in_bounds():
    doc = parse_document(TUTORIAL)
    blocks = list(extract_blocks(doc))
    for prev, cur in zip(blocks, blocks[1:]):
        assert prev.end_line < cur.start_line
    assert all(1 <= b.start_line < b.end_line <= len(doc) for b in blocks)


def test_info_string_extra_tokens_are_kept():
    blocks = extract_blocks_from_text("```python title=demo.py\npass\n```\n")
    assert blocks[0].declared_language == "python"
    assert blocks[0].info == ("title=demo.py",)
