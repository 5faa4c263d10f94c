"""Formatting pipeline: parse -> wrap -> render"""

from typing import Optional

from outlawfmt.config import Settings
from outlawfmt.core.models import Document
from outlawfmt.core.parse import parse_document
from outlawfmt.core.render import format_to_string
from outlawfmt.core.wrap import wrap_long_lines


def wrap_document(document: Document, settings: Settings) -> Document:
    """Wrap the long body lines of every block in place."""
    for block in document.blocks:
        wrap_long_lines(block.contents, settings)
    return document


def format_text(contents: str, settings: Optional[Settings] = None) -> str:
    """Return the canonical form of an outline document."""
    settings = settings or Settings()
    document = parse_document(contents, settings)
    wrap_document(document, settings)
    return format_to_string(document, settings)
