"""Serialization of a parsed Document back to canonical outline text"""

from enum import Enum, auto

from outlawfmt.config import Settings
from outlawfmt.core.lines import DEFAULT_SETTINGS
from outlawfmt.core.models import Document, FormattedLine, LineKind


class _Action(Enum):
    START = auto()
    INSERT_BLANK_LINE = auto()
    INSERT_BODY_TEXT = auto()


def indentation(line: FormattedLine, settings: Settings = DEFAULT_SETTINGS) -> str:
    return " " * (line.indent_level * settings.indent_shift)


def format_to_string(document: Document, settings: Settings = DEFAULT_SETTINGS) -> str:
    """Render every block: header, one blank line, then its body lines.

    Runs of blank lines collapse to one, except for preformatted lines which are kept verbatim.
    """
    parts: list[str] = []
    last_action = _Action.START

    for block in document.blocks:
        if last_action is _Action.INSERT_BODY_TEXT:
            parts.append("\n")

        parts.append(f"{indentation(block.header, settings)}{block.header.contents}\n\n")
        last_action = _Action.INSERT_BLANK_LINE

        for line in block.contents:
            if line.is_empty():
                if line.kind is not LineKind.PREFORMATTED and last_action is _Action.INSERT_BLANK_LINE:
                    continue
                parts.append("\n")
                last_action = _Action.INSERT_BLANK_LINE
            else:
                parts.append(f"{indentation(line, settings)}{line.contents}\n")
                last_action = _Action.INSERT_BODY_TEXT

    return "".join(parts).lstrip("\n").rstrip(" ")
