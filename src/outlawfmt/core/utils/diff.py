"""Reporting the difference between a document and its formatted form"""

import difflib
from dataclasses import dataclass


@dataclass(frozen=True)
class Reformat:
    """A document as read and as it would be written."""
    name:      str
    original:  str
    formatted: str

    @property
    def changed(self) -> bool:
        return self.original != self.formatted

    def diff(self) -> str:
        """Unified diff from a/<name> to b/<name>; empty when nothing changes."""
        return "".join(difflib.unified_diff(
            self.original.splitlines(keepends=True),
            self.formatted.splitlines(keepends=True),
            fromfile=f"a/{self.name}",
            tofile=f"b/{self.name}",
        ))

    def check_message(self) -> str:
        """One-line `--check` verdict with the number of added and removed lines."""
        if not self.changed:
            return f"{self.name} is already formatted"
        added = removed = 0
        # skip the ---/+++ file header
        for line in self.diff().splitlines()[2:]:
            if line.startswith("+"):
                added += 1
            elif line.startswith("-"):
                removed += 1
        return f"would reformat {self.name} (+{added} -{removed} lines)"
