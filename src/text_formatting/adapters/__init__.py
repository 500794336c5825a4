from __future__ import annotations

from functools import lru_cache
from typing import Dict, Type

from .base import Adapter, AdapterResponse
from .html import HTMLAdapter, text_to_html
from .markdown import MarkdownAdapter, html_to_markdown
from ..formats import OutputFormat

_ADAPTER_CLASSES: Dict[OutputFormat, Type[Adapter]] = {
    OutputFormat.HTML: HTMLAdapter,
    OutputFormat.MARKDOWN: MarkdownAdapter,
}


@lru_cache(maxsize=len(_ADAPTER_CLASSES))
def get_adapter(output_format: OutputFormat) -> Adapter:
    adapter_cls = _ADAPTER_CLASSES.get(output_format)
    if not adapter_cls:
        raise KeyError(f"No adapter registered for {output_format}")
    return adapter_cls()  # type: ignore[return-value]


__all__ = [
    "Adapter",
    "AdapterResponse",
    "HTMLAdapter",
    "MarkdownAdapter",
    "get_adapter",
    "html_to_markdown",
    "text_to_html",
]
