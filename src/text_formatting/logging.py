from __future__ import annotations

import json
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class OperationLogEntry:
    operation: str
    status: str
    input_chars: int
    output_chars: int
    warnings: list[str]
    error_code: str | None
    elapsed_ms: float
    output_path: str | None = None
    timestamp: str = field(
        default_factory=lambda: time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())
    )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class OperationLogger:
    """Appends one JSON line per operation; a logger without a file is a no-op."""

    def __init__(self, log_file: Path | None) -> None:
        self._log_file = log_file

    def append(self, entry: OperationLogEntry) -> None:
        if self._log_file is None:
            return
        self._log_file.parent.mkdir(parents=True, exist_ok=True)
        line = json.dumps(entry.to_dict(), ensure_ascii=False)
        with self._log_file.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
