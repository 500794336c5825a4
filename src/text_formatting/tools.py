"""Named operations exposed to callers, with their argument schemas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ValidationError

from .core import FormattingError, FormattingService
from .schemas import (
    FormatForHtmlArguments,
    HtmlToMarkdownArguments,
    SlugifyTitleArguments,
    TextContent,
    ToolDescriptor,
    ToolResult,
)


@dataclass(frozen=True, slots=True)
class ToolSpec:
    name: str
    description: str
    arguments: type[BaseModel]
    handler: Callable[[FormattingService, Any], str]

    def describe(self) -> ToolDescriptor:
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=self.arguments.model_json_schema(),
        )


def _format_for_html(service: FormattingService, args: FormatForHtmlArguments) -> str:
    return service.format_for_html(args.text).text


def _slugify_title(service: FormattingService, args: SlugifyTitleArguments) -> str:
    return service.slugify_title(args.title).text


def _html_to_markdown(service: FormattingService, args: HtmlToMarkdownArguments) -> str:
    return service.html_to_markdown(args.html, args.title).message


TOOLS: dict[str, ToolSpec] = {
    spec.name: spec
    for spec in (
        ToolSpec(
            name="format_for_html",
            description=(
                "Takes plain text and formats it to HTML with escaped special characters "
                "and proper HTML elements (headings, paragraphs, line breaks)."
            ),
            arguments=FormatForHtmlArguments,
            handler=_format_for_html,
        ),
        ToolSpec(
            name="slugify_title",
            description=(
                "Takes a title string and returns a URL-friendly slug: lowercase, no punctuation, "
                "words joined by dashes. Example: 'My Blog Post!' -> 'my-blog-post'"
            ),
            arguments=SlugifyTitleArguments,
            handler=_slugify_title,
        ),
        ToolSpec(
            name="html_to_markdown",
            description=(
                "Converts an HTML string to Markdown and saves it as a .md file in the current "
                "working directory. The filename is based on the provided title."
            ),
            arguments=HtmlToMarkdownArguments,
            handler=_html_to_markdown,
        ),
    )
}


def get_tool(name: str) -> ToolSpec:
    try:
        return TOOLS[name]
    except KeyError as exc:
        raise FormattingError("UNKNOWN_TOOL", f"No tool named {name!r}") from exc


def list_tools() -> list[ToolDescriptor]:
    return [spec.describe() for spec in TOOLS.values()]


def call_tool(service: FormattingService, name: str, arguments: Mapping[str, Any]) -> ToolResult:
    spec = get_tool(name)
    try:
        args = spec.arguments.model_validate(dict(arguments))
    except ValidationError as exc:
        raise FormattingError("INVALID_ARGUMENTS", str(exc)) from exc
    text = spec.handler(service, args)
    return ToolResult(content=[TextContent(text=text)])


__all__ = ["TOOLS", "ToolSpec", "call_tool", "get_tool", "list_tools"]
