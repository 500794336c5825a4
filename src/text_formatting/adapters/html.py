from __future__ import annotations

import re
from enum import Enum

from .base import AdapterResponse
from ..formats import OutputFormat
from ..utils import escape_html


HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")


class ParagraphState(Enum):
    CLOSED = "closed"
    OPEN = "open"


def text_to_html(text: str) -> str:
    """Render plain text as HTML.

    ``#``-prefixed lines become headings, blank lines end paragraphs and
    consecutive text lines share one ``<p>`` joined by ``<br>``. A
    paragraph that is still open when the input ends is closed.
    """

    output: list[str] = []
    state = ParagraphState.CLOSED

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        heading = HEADING_RE.match(line)
        if heading:
            if state is ParagraphState.OPEN:
                output.append("</p>")
                state = ParagraphState.CLOSED
            level = len(heading.group(1))
            output.append(f"<h{level}>{escape_html(heading.group(2))}</h{level}>")
        elif not line:
            if state is ParagraphState.OPEN:
                output.append("</p>")
                state = ParagraphState.CLOSED
        else:
            if state is ParagraphState.CLOSED:
                output.append("<p>")
                state = ParagraphState.OPEN
            else:
                output.append("<br>")
            output.append(escape_html(line))

    if state is ParagraphState.OPEN:
        output.append("</p>")
    return "\n".join(output)


class HTMLAdapter:
    output_format = OutputFormat.HTML

    def convert(self, source: str) -> AdapterResponse:
        return AdapterResponse(text=text_to_html(source))
