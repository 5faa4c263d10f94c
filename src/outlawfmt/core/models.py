"""Data model for parsed outline documents: raw lines, formatted lines, blocks"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class LineKind(Enum):
    """Closed set of line kinds; all but LIST_CONTINUATION_LINE follow from a line's prefix."""
    TEXT = "text"
    HEADER = "header"
    LIST_BULLET_POINT = "list_bullet_point"
    LIST_TODO_ITEM = "list_todo_item"
    # A wrapped line belonging to a list item started on an earlier line
    LIST_CONTINUATION_LINE = "list_continuation_line"
    # May be longer than the maximum line length and is never wrapped
    PREFORMATTED = "preformatted"
    QUOTE = "quote"


LIST_KINDS = frozenset({
    LineKind.LIST_BULLET_POINT,
    LineKind.LIST_TODO_ITEM,
    LineKind.LIST_CONTINUATION_LINE,
})


@dataclass(frozen=True)
class RawLine:
    """One physical input line as read, before any interpretation."""
    raw:        str = ""
    num_indent: int = 0     # leading whitespace characters
    trimmed:    str = ""

    @classmethod
    def from_string(cls, raw: str) -> "RawLine":
        stripped = raw.lstrip()
        return cls(raw=raw, num_indent=len(raw) - len(stripped), trimmed=stripped.rstrip())

    def is_empty(self) -> bool:
        return not self.trimmed


@dataclass
class FormattedLine:
    """A normalized line: its kind, abstract nesting level and rendered content."""
    contents:     str = ""
    indent_level: int = 0
    kind:         LineKind = LineKind.TEXT
    original_raw: RawLine = field(default_factory=RawLine)

    @classmethod
    def empty(cls) -> "FormattedLine":
        return cls()

    def is_empty(self) -> bool:
        return not self.contents

    def is_list_item(self) -> bool:
        return self.kind in LIST_KINDS

    @property
    def raw_indent(self) -> int:
        return self.original_raw.num_indent


@dataclass
class Block:
    """A header line and the body lines that follow it up to the next header."""
    header:   FormattedLine = field(default_factory=FormattedLine.empty)
    contents: list[FormattedLine] = field(default_factory=list)

    @property
    def is_before_first_header(self) -> bool:
        return self.header.is_empty()

    @property
    def indent_level(self) -> int:
        return self.header.indent_level

    def add_line(self, line: FormattedLine) -> None:
        self.contents.append(line)

    def has_header(self) -> bool:
        return not self.header.is_empty()

    def raw_header_indent(self) -> int:
        return self.header.raw_indent

    def contents_indent_level(self) -> int:
        """Level of the block's text contents (and of sibling headers' contents)."""
        return 0 if self.is_before_first_header else self.header.indent_level + 1

    def last_line(self) -> Optional[FormattedLine]:
        return self.contents[-1] if self.contents else None

    def find_previous_of(self, kind: LineKind) -> Optional[FormattedLine]:
        return next((line for line in reversed(self.contents) if line.kind is kind), None)

    def find_latest_line_with_raw_indent(self, num_indent: int) -> Optional[FormattedLine]:
        return next((line for line in reversed(self.contents) if line.raw_indent == num_indent), None)


@dataclass
class Document:
    """Blocks in reading order; always starts with the block of lines before the first header."""
    blocks: list[Block] = field(default_factory=lambda: [Block()])

    def add_block(self, block: Block) -> None:
        self.blocks.append(block)

    def last_block(self) -> Block:
        assert self.blocks, "there should always be at least one Block"
        return self.blocks[-1]

    def find_latest_block_with_raw_indent(self, num_indent: int) -> Optional[Block]:
        return next((b for b in reversed(self.blocks) if b.raw_header_indent() == num_indent), None)
