"""Raw line extraction and prefix-based line classification"""

from outlawfmt.config import Settings
from outlawfmt.core.models import LineKind, RawLine


DEFAULT_SETTINGS = Settings()


def split_lines(contents: str) -> list[RawLine]:
    """Split text into RawLines; a trailing newline does not add an empty line."""
    return [RawLine.from_string(line) for line in contents.splitlines()]


def is_fence(trimmed: str, settings: Settings = DEFAULT_SETTINGS) -> bool:
    return trimmed.startswith(settings.fence_markers)


def classify_line(trimmed: str, settings: Settings = DEFAULT_SETTINGS) -> LineKind:
    """Detect the kind of a trimmed line from its first characters.

    Cannot detect LIST_CONTINUATION_LINE, which depends on the line before it.
    """
    if trimmed.startswith(settings.header_prefix):
        return LineKind.HEADER
    if trimmed.startswith(settings.bullet_prefix):
        return LineKind.LIST_BULLET_POINT
    if trimmed.startswith(settings.todo_prefix):
        return LineKind.LIST_TODO_ITEM
    if is_fence(trimmed, settings) or trimmed.startswith(settings.preformatted_prefix):
        return LineKind.PREFORMATTED
    if trimmed.startswith(settings.quote_prefix):
        return LineKind.QUOTE
    return LineKind.TEXT


def kind_prefix(kind: LineKind, settings: Settings = DEFAULT_SETTINGS) -> str:
    """Marker a line of this kind starts with once rendered."""
    return {
        LineKind.HEADER:                 settings.header_prefix,
        LineKind.LIST_BULLET_POINT:      settings.bullet_prefix,
        LineKind.LIST_CONTINUATION_LINE: settings.continuation_prefix,
        LineKind.LIST_TODO_ITEM:         settings.todo_prefix,
        LineKind.PREFORMATTED:           settings.preformatted_prefix,
        LineKind.QUOTE:                  settings.quote_prefix,
    }.get(kind, "")


def prefix_length(kind: LineKind, settings: Settings = DEFAULT_SETTINGS) -> int:
    # '[ ] ' or '[x] '
    if kind is LineKind.LIST_TODO_ITEM:
        return settings.todo_prefix_length
    return len(kind_prefix(kind, settings))
