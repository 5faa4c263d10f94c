"""Unit tests for core/pipeline.py"""

import pytest

from outlawfmt.config import Settings
from outlawfmt.core.lines import classify_line
from outlawfmt.core.models import LineKind
from outlawfmt.core.pipeline import format_text


LONG_PARAGRAPH = " ".join(f"word{i}" for i in range(80))
LONG_ITEM = " ".join(f"item{i}" for i in range(60))
MARKED_PROSE = " ".join(f"word{i} {m}" for i, m in enumerate(["[1]", "*", "===", ">", "|", "```", "~~~", "[x]"] * 10))

DOCUMENTS = [
    "",
    "plain text only",
    "=== A\ntext\n  === B\ntext2",
    "* item\nmore",
    f"=== A\n{LONG_PARAGRAPH}\n  === B\n    * {LONG_ITEM}\n        * {LONG_ITEM}\n> {LONG_PARAGRAPH}\n",
    "=== A\n\n\n\n   text\n      === B\n  === C\n=== D\n\n\n",
    "```\n=== literal\n\n\n  code\n```\n=== H\n| pre   line\n",
    "* item\n```\n    code\n```\n",
    "* item\n```\n    code\n\n\n```\nafter\n",
    "=== H\n  * item\n  ~~~\n  x\n      y\n  ~~~\n",
    "aaaa bbbb cccc dddd [1] eeee\nnext line\n",
    f"=== H\n{MARKED_PROSE}\n* {MARKED_PROSE}\nnext line\n> {MARKED_PROSE}\n",
]


def test_format_sample_outline(sample_outline, sample_formatted):
    """A mixed document is normalized to the canonical layout."""
    assert format_text(sample_outline) == sample_formatted


def test_sample_outline_is_stable(sample_formatted):
    """The canonical sample is already formatted."""
    assert format_text(sample_formatted) == sample_formatted


def test_empty_input():
    """Empty input gives empty output."""
    assert format_text("") == ""


def test_example_nested_headers():
    """A deeper header nests one level, each followed by its indented text."""
    assert format_text("=== A\ntext\n  === B\ntext2") == (
        "=== A\n\n    text\n\n    === B\n\n        text2\n"
    )


def test_example_bullet_continuation():
    """Text directly after a bullet is aligned under the bullet's text."""
    assert format_text("* item\nmore") == "* item\n  more\n"


def test_example_unbreakable_line():
    """A 300 character token is never split."""
    token = "x" * 300
    assert format_text(f"=== A\n{token}") == f"=== A\n\n    {token}\n"


@pytest.mark.parametrize("text", DOCUMENTS)
def test_idempotent(text):
    """Formatting formatted output changes nothing."""
    once = format_text(text)
    assert format_text(once) == once


@pytest.mark.parametrize("text", DOCUMENTS)
def test_width_bound(text):
    """No wrapped line is longer than the maximum line length."""
    for line in format_text(text).splitlines():
        if classify_line(line.strip()) is LineKind.PREFORMATTED or " " not in line.strip():
            continue
        assert len(line) <= 119, line


@pytest.mark.parametrize("text", DOCUMENTS)
def test_no_double_blank_lines_outside_fences(text):
    """Outside fenced regions, blank lines never appear twice in a row."""
    in_fence = False
    previous_blank = False
    for line in format_text(text).splitlines():
        if line.strip().startswith("```"):
            in_fence = not in_fence
        blank = not line.strip()
        if not in_fence:
            assert not (blank and previous_blank)
        previous_blank = blank


def test_custom_line_length():
    """max_line_length applies to the whole pipeline."""
    out = format_text(f"=== A\n{LONG_PARAGRAPH}", Settings(max_line_length=40))
    body = out.splitlines()[2:]
    assert len(body) > 1
    assert all(len(line) <= 40 for line in body)
    assert all(line.startswith("    word") for line in body)


def test_calls_are_independent():
    """Formatting one document does not affect the next."""
    first = format_text("=== A\n      === B\n")
    assert format_text("  === C\n") == "    === C\n\n"
    assert format_text("=== A\n      === B\n") == first


@pytest.mark.parametrize("text", DOCUMENTS)
def test_idempotent_when_narrow(text):
    """Idempotence and the width bound also hold when nearly every line wraps."""
    settings = Settings(max_line_length=24)
    once = format_text(text, settings)
    assert format_text(once, settings) == once
    for line in once.splitlines():
        if classify_line(line.strip()) is LineKind.PREFORMATTED or " " not in line.strip():
            continue
        assert len(line) <= 24, line


def test_fence_after_bullet_stays_in_item():
    """A fence following a bullet is indented under the bullet's text."""
    assert format_text("* item\n```\n    code\n```\n") == "* item\n  ```\n      code\n  ```\n"


def test_wrapped_text_does_not_start_with_marker():
    """A reference like '[1]' is not moved to the start of a wrapped line."""
    out = format_text("aaaa bbbb cccc dddd [1] eeee\nnext line\n", Settings(max_line_length=20))
    assert out == "aaaa bbbb cccc\ndddd [1] eeee\nnext line\n"
