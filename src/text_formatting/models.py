"""Result models for text formatting operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class FormattedText:
    """Output of an in-memory conversion."""

    text: str
    warnings: list[str] = field(default_factory=list)


@dataclass(slots=True)
class MarkdownDocument:
    """A Markdown conversion that has been written to disk."""

    filename: str
    path: Path
    markdown: str
    message: str
    warnings: list[str] = field(default_factory=list)


__all__ = [
    "FormattedText",
    "MarkdownDocument",
]
