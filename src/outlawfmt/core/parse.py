"""Outline parsing: line kinds and resolution of nesting levels from raw indentation"""

from typing import Optional

from outlawfmt.config import Settings
from outlawfmt.core.lines import DEFAULT_SETTINGS, classify_line, kind_prefix, split_lines
from outlawfmt.core.models import Block, Document, FormattedLine, LineKind, RawLine


def _from_raw(raw_line: RawLine, indent_level: int, settings: Settings) -> FormattedLine:
    return FormattedLine(
        contents=raw_line.trimmed,
        indent_level=indent_level,
        kind=classify_line(raw_line.trimmed, settings),
        original_raw=raw_line,
    )


def parse_document(contents: str, settings: Settings = DEFAULT_SETTINGS) -> Document:
    """Parse `contents` into Blocks, deciding each line's kind and nesting level."""
    document = Document()
    fence: Optional[FormattedLine] = None

    for raw_line in split_lines(contents):
        current_block = document.last_block()

        if fence is not None:
            # Inside a fenced region everything is literal, up to and including the closing fence
            current_block.add_line(_fenced_line(fence, raw_line, settings))
            if raw_line.trimmed.startswith(_fence_marker(fence.original_raw.trimmed, settings)):
                fence = None
            continue

        kind = classify_line(raw_line.trimmed, settings)

        if kind is LineKind.HEADER:
            indent_level = determine_new_header_indent(document, raw_line)
            document.add_block(Block(header=_from_raw(raw_line, indent_level, settings)))
        elif kind is LineKind.LIST_BULLET_POINT:
            indent_level = determine_new_bullet_point_indent(current_block, raw_line)
            current_block.add_line(_from_raw(raw_line, indent_level, settings))
        else:
            # Plain text, a prefixed line (quote, preformatted, todo) or the continuation of a
            # (line wrapped) list item
            line = parse_text_line(current_block, raw_line, settings)
            current_block.add_line(line)
            if _fence_marker(raw_line.trimmed, settings):
                fence = line

    return document


def _fence_marker(trimmed: str, settings: Settings) -> Optional[str]:
    return next((m for m in settings.fence_markers if trimmed.startswith(m)), None)


def _fenced_line(fence: FormattedLine, raw_line: RawLine, settings: Settings) -> FormattedLine:
    """Keep a line inside a fence verbatim, relative to the opening fence's indentation.

    A fence opened on a list continuation line keeps its lines under the continuation prefix, so
    they stay in the same column when the output is parsed again.
    """
    strip = min(fence.raw_indent, raw_line.num_indent)
    contents = raw_line.raw[strip:].rstrip()
    if contents and fence.kind is LineKind.LIST_CONTINUATION_LINE:
        contents = f"{kind_prefix(fence.kind, settings)}{contents}"
    return FormattedLine(
        contents=contents,
        indent_level=fence.indent_level,
        kind=LineKind.PREFORMATTED,
        original_raw=raw_line,
    )


def determine_new_header_indent(document: Document, raw_line: RawLine) -> int:
    """Decide whether a header is a child, sibling or parent of the previous block's header."""
    previous_block = document.last_block()
    previous_indent = previous_block.raw_header_indent()

    if raw_line.num_indent == previous_indent:
        return previous_block.indent_level
    if raw_line.num_indent > previous_indent:
        # Only one level deeper, however many spaces were added
        return previous_block.indent_level + 1

    # Parent of *a* previous header
    ancestor = document.find_latest_block_with_raw_indent(raw_line.num_indent)
    return ancestor.indent_level if ancestor else 0


def determine_new_bullet_point_indent(current_block: Block, raw_line: RawLine) -> int:
    previous_bullet = current_block.find_previous_of(LineKind.LIST_BULLET_POINT)

    if previous_bullet is not None:
        if raw_line.num_indent == previous_bullet.raw_indent:
            return previous_bullet.indent_level
        if raw_line.num_indent > previous_bullet.raw_indent:
            return previous_bullet.indent_level + 1

        # Shifted left: reuse the level of the latest line with the same raw indent
        match = current_block.find_latest_line_with_raw_indent(raw_line.num_indent)
        return match.indent_level if match else current_block.contents_indent_level() + 1

    previous_text = current_block.find_previous_of(LineKind.TEXT)
    if previous_text is not None:
        return previous_text.indent_level
    return current_block.contents_indent_level()


def parse_text_line(current_block: Block, raw_line: RawLine, settings: Settings = DEFAULT_SETTINGS) -> FormattedLine:
    """Resolve any non-header, non-bullet line against the block it is added to."""
    previous_line = current_block.last_line()

    if previous_line is not None and previous_line.is_list_item() and not raw_line.is_empty():
        prefix = kind_prefix(LineKind.LIST_CONTINUATION_LINE, settings)
        return FormattedLine(
            contents=f"{prefix}{raw_line.trimmed}",
            indent_level=previous_line.indent_level,
            kind=LineKind.LIST_CONTINUATION_LINE,
            original_raw=raw_line,
        )
    if current_block.has_header():
        # First line after a header and every later one sit one level below the header
        return _from_raw(raw_line, current_block.indent_level + 1, settings)

    # Lines before the first header
    return _from_raw(raw_line, current_block.contents_indent_level(), settings)
