from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    HTML = "html"
    MARKDOWN = "md"

    @property
    def extension(self) -> str:
        return f".{self.value}"


__all__ = ["OutputFormat"]
