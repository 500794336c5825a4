from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(slots=True)
class AdapterResponse:
    text: str
    warnings: list[str] = field(default_factory=list)


class Adapter(Protocol):
    def convert(self, source: str) -> AdapterResponse:  # pragma: no cover - interface
        ...
