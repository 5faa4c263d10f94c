from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO


class SourceReadError(RuntimeError):
    """An input file or stream could not be read; `reason` classifies the failure."""

    def __init__(self, reason: str, source: str, message: str):
        super().__init__(message)
        self.reason = reason
        self.source = source


def read_source(path: Optional[Path], stdin: TextIO | None = None) -> str:
    """Read all of `path`, or of stdin when no path is given."""
    if path is None:
        stream = stdin or sys.stdin
        try:
            return stream.read()
        except OSError as e:
            raise SourceReadError("io_error", "<stdin>", f"Could not read <stdin>: {e}") from e

    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SourceReadError("not_found", str(path), f"File not found: {path}") from e
    except PermissionError as e:
        raise SourceReadError("permission_denied", str(path), f"Permission denied: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError("io_error", str(path), f"Could not read {path}: {e}") from e


def write_text_file(path: Path, content: str, encoding: str = "utf-8") -> int:
    data = content.encode(encoding)
    path.write_bytes(data)
    return len(data)
