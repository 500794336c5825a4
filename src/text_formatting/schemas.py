from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class FormatForHtmlArguments(BaseModel):
    text: str = Field(description="The plain text to convert into HTML")


class SlugifyTitleArguments(BaseModel):
    title: str = Field(description="The title to convert into a URL-friendly slug")


class HtmlToMarkdownArguments(BaseModel):
    html: str = Field(description="The HTML content to convert to Markdown")
    title: str = Field(description="Title for the output file, used to generate the filename")


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    content: list[TextContent]
    is_error: bool = False


class ToolDescriptor(BaseModel):
    name: str
    description: str
    input_schema: dict[str, Any]


class HealthStatus(BaseModel):
    status: str
    version: str
