from snipcheck.extract import extract_blocks_from_text
from snipcheck.utils.language import (
    canonical_language,
    default_command,
    infer_subject_language,
    suffix_for,
)


def test_canonical_language_aliases():
    assert canonical_language("py") == "python"
    assert canonical_language("JS") == "javascript"
    assert canonical_language("shell") == "bash"
    assert canonical_language("c") == "c"
    assert canonical_language("") == ""


def test_suffix_and_default_command():
    assert suffix_for("py") == ".py"
    assert suffix_for("unknown-lang") == ".txt"
    assert default_command("python") == ["python3"]
    assert default_command("c") is None
    assert default_command("unknown-lang") is None


def test_default_command_is_a_copy():
    cmd = default_command("python")
    cmd.append("-x")
    assert default_command("python") == ["python3"]


def test_infer_dominant_tag():
    blocks = extract_blocks_from_text(
        "```sh\nls\n```\n```c\nint a;\n```\n```c\nint b;\n```\n```\nplain\n```\n"
    )
    assert infer_subject_language(blocks) == "c"


def test_infer_tie_breaks_on_first_appearance():
    blocks = extract_blocks_from_text("```sh\nls\n```\n```py\nx\n```\n")
    assert infer_subject_language(blocks) == "bash"


def test_infer_none_without_tags():
    assert infer_subject_language(extract_blocks_from_text("```\nplain\n```\n")) is None
    assert infer_subject_language([]) is None


def test_zig_has_a_default_tool():
    assert canonical_language("Zig") == "zig"
    assert canonical_language("ziglang") == "zig"
    assert suffix_for("zig") == ".zig"
    assert default_command("zig") == ["zig", "run"]


def test_infer_zig_tutorial():
    blocks = extract_blocks_from_text(
        '```zig\nconst std = @import("std");\n```\n```\ngrammar\n```\n```zig\npub fn main() void {}\n```\n'
    )
    assert infer_subject_language(blocks) == "zig"
