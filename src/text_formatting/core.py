from __future__ import annotations

import time
from pathlib import Path

from .adapters import AdapterResponse, get_adapter
from .config import AppConfig
from .formats import OutputFormat
from .logging import OperationLogEntry, OperationLogger
from .models import FormattedText, MarkdownDocument
from .utils import atomic_write, elapsed_ms, slugify


RULE = "─" * 40


class FormattingError(RuntimeError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


def markdown_filename(title: str) -> str:
    return slugify(title) + OutputFormat.MARKDOWN.extension


def build_confirmation(filename: str, path: Path, markdown: str, preview_chars: int = 0) -> str:
    preview = markdown
    if preview_chars and len(markdown) > preview_chars:
        preview = markdown[:preview_chars] + "…"
    return (
        "File saved successfully!\n\n"
        f"Filename : {filename}\n"
        f"Location : {path}\n\n"
        f"{RULE}\n"
        f"{preview}"
    )


class FormattingService:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or AppConfig()
        self._logger = OperationLogger(self._config.runtime.log_path)

    def format_for_html(self, text: str) -> FormattedText:
        start = time.perf_counter()
        response = self._run_adapter(OutputFormat.HTML, text)
        self._log_success("format_for_html", text, response.text, response.warnings, start)
        return FormattedText(text=response.text, warnings=response.warnings)

    def slugify_title(self, title: str) -> FormattedText:
        start = time.perf_counter()
        slug = slugify(title)
        self._log_success("slugify_title", title, slug, [], start)
        return FormattedText(text=slug)

    def html_to_markdown(self, html: str, title: str) -> MarkdownDocument:
        start = time.perf_counter()
        response = self._run_adapter(OutputFormat.MARKDOWN, html)
        filename = markdown_filename(title)
        path = (self._config.runtime.output_dir / filename).resolve()
        try:
            self._write_output(path, response.text)
        except FormattingError as exc:
            self._logger.append(
                OperationLogEntry(
                    operation="html_to_markdown",
                    status="failure",
                    input_chars=len(html),
                    output_chars=0,
                    warnings=response.warnings,
                    error_code=exc.code,
                    elapsed_ms=elapsed_ms(start),
                    output_path=str(path),
                )
            )
            raise
        message = build_confirmation(filename, path, response.text, self._config.runtime.preview_chars)
        self._log_success(
            "html_to_markdown", html, response.text, response.warnings, start, output_path=path
        )
        return MarkdownDocument(
            filename=filename,
            path=path,
            markdown=response.text,
            message=message,
            warnings=response.warnings,
        )

    def _run_adapter(self, output_format: OutputFormat, source: str) -> AdapterResponse:
        return get_adapter(output_format).convert(source)

    def _write_output(self, path: Path, markdown: str) -> None:
        try:
            atomic_write(path, markdown)
        except OSError as exc:
            raise FormattingError("WRITE_FAILED", f"Could not write {path}: {exc}") from exc

    def _log_success(
        self,
        operation: str,
        source: str,
        output: str,
        warnings: list[str],
        start: float,
        *,
        output_path: Path | None = None,
    ) -> None:
        self._logger.append(
            OperationLogEntry(
                operation=operation,
                status="success",
                input_chars=len(source),
                output_chars=len(output),
                warnings=warnings,
                error_code=None,
                elapsed_ms=elapsed_ms(start),
                output_path=str(output_path) if output_path else None,
            )
        )


__all__ = [
    "FormattingError",
    "FormattingService",
    "build_confirmation",
    "markdown_filename",
]
