"""Line wrapping: split over-long body lines at word boundaries until nothing changes"""

from dataclasses import replace
from typing import Optional

from outlawfmt.config import Settings
from outlawfmt.core.lines import DEFAULT_SETTINGS, classify_line, kind_prefix, prefix_length
from outlawfmt.core.models import FormattedLine, LineKind
from outlawfmt.util.logging import get_logger


logger = get_logger(__name__)


def line_budget(line: FormattedLine, settings: Settings = DEFAULT_SETTINGS) -> int:
    """Room left for a line's contents once its indentation is rendered."""
    indent = line.indent_level * settings.indent_shift
    return max(settings.max_line_length - indent, prefix_length(line.kind, settings) + 1)


def needs_wrapping(line: FormattedLine, settings: Settings = DEFAULT_SETTINGS) -> bool:
    return line.kind is not LineKind.PREFORMATTED and len(line.contents) > line_budget(line, settings)


def wrap_long_lines(lines: list[FormattedLine], settings: Settings = DEFAULT_SETTINGS) -> bool:
    """Split lines longer than the maximum line length in place, at the nearest whitespace.

    Every split adds a line that may itself still be too long, so passes are repeated until one
    adds nothing. Returns False if `settings.max_wrap_iterations` passes were not enough.
    """
    for _ in range(settings.max_wrap_iterations):
        to_insert: list[tuple[int, FormattedLine]] = []

        for index, line in enumerate(lines):
            if not needs_wrapping(line, settings):
                continue
            split_pos = find_word_boundary(line, line_budget(line, settings), settings)
            if split_pos is None:
                continue
            to_insert.append((index + 1, split_line(line, split_pos, settings)))

        if not to_insert:
            return True

        # Each insertion shifts the following targets down by one
        for offset, (index, new_line) in enumerate(to_insert):
            lines.insert(index + offset, new_line)

    logger.warning(
        "Line wrapping did not settle after %d passes; leaving remaining long lines as-is",
        settings.max_wrap_iterations,
    )
    return False


def find_word_boundary(line: FormattedLine, max_length: int, settings: Settings = DEFAULT_SETTINGS) -> Optional[int]:
    """Index of the whitespace nearest to (at or before) `max_length`, ignoring the line's prefix.

    Falls back to the first whitespace after `max_length`, e.g. for a line starting with a very long
    URL. Whitespace is skipped when the text after it would read as a header, list item, fence or
    other marked line once the output is parsed again. Returns None when there is nowhere left to
    split.
    """
    start = prefix_length(line.kind, settings)
    window = line.contents[start:max_length + 1]
    # pos 0 would leave nothing but the prefix behind
    for pos in range(len(window) - 1, 0, -1):
        if window[pos].isspace() and _keeps_kind(line, start + pos, settings):
            return start + pos

    for pos in range(max(max_length, start), len(line.contents)):
        if line.contents[pos].isspace() and _keeps_kind(line, pos, settings):
            return pos
    return None


def _keeps_kind(line: FormattedLine, split_pos: int, settings: Settings) -> bool:
    # Quote remainders get the quote prefix back, everything else is re-read from its own text
    if line.kind is LineKind.QUOTE:
        return True
    return classify_line(line.contents[split_pos:].strip(), settings) is LineKind.TEXT


def split_line(long_line: FormattedLine, split_pos: int, settings: Settings = DEFAULT_SETTINGS) -> FormattedLine:
    """Cut `long_line` at `split_pos` and return the remainder as a new line for below it."""
    head, tail = long_line.contents[:split_pos], long_line.contents[split_pos:]

    # A wrapped list item must not start a new list item
    kind = LineKind.LIST_CONTINUATION_LINE if long_line.is_list_item() else long_line.kind

    long_line.contents = head.rstrip()
    return replace(long_line, contents=f"{kind_prefix(kind, settings)}{tail.strip()}", kind=kind)
