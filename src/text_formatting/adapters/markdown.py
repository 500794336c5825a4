from __future__ import annotations

from typing import Iterable, Iterator

from .base import AdapterResponse
from ..formats import OutputFormat
from ..htmltree import (
    BLOCK_TAGS,
    HEADING_TAGS,
    INLINE_TAGS,
    LIST_TAGS,
    Element,
    Node,
    Preformatted,
    Text,
    is_block,
    parse_fragment,
    text_content,
)
from ..utils import collapse_blank_lines


KNOWN_TAGS = BLOCK_TAGS | INLINE_TAGS | {"li"}
FENCE = "```"


def _single_line(text: str) -> str:
    # Headings and list items cannot span lines; a <br> inside them becomes a space.
    return " ".join(line.strip() for line in text.split("\n") if line.strip())


class _MarkdownRenderer:
    def __init__(self) -> None:
        self.unsupported: set[str] = set()

    def render(self, root: Element) -> str:
        return collapse_blank_lines("\n\n".join(self.blocks(root.children)))

    def blocks(self, nodes: Iterable[Node]) -> list[str]:
        rendered: list[str] = []
        run: list[str] = []

        def flush() -> None:
            text = "".join(run).strip()
            run.clear()
            if text:
                rendered.append(text)

        for node in self._flatten(nodes):
            if is_block(node):
                flush()
                block = self.block(node)
                if block:
                    rendered.append(block)
            else:
                run.append(self.inline(node))
        flush()
        return rendered

    def _flatten(self, nodes: Iterable[Node]) -> Iterator[Node]:
        # Unknown containers (div, table, body, ...) dissolve into their children.
        for node in nodes:
            if isinstance(node, Element) and node.tag not in KNOWN_TAGS:
                self.unsupported.add(node.tag)
                yield from self._flatten(node.children)
            else:
                yield node

    def block(self, node: Node) -> str:
        if isinstance(node, Preformatted):
            code = node.code.strip("\n")
            return f"{FENCE}\n{code}\n{FENCE}"
        if node.tag in HEADING_TAGS:
            return "#" * HEADING_TAGS[node.tag] + " " + _single_line(self.inline_children(node))
        if node.tag == "p":
            return self.inline_children(node).strip()
        if node.tag == "blockquote":
            inner = "\n\n".join(self.blocks(node.children)).strip()
            if not inner:
                return ""
            return "\n".join(f"> {line}" for line in inner.split("\n"))
        if node.tag in LIST_TAGS:
            return "\n".join(self.list_lines(node, depth=0))
        if node.tag == "hr":
            return "---"
        return self.inline_children(node).strip()

    def list_lines(self, node: Element, depth: int) -> list[str]:
        lines: list[str] = []
        indent = "  " * depth
        number = 0
        for child in node.children:
            if not (isinstance(child, Element) and child.tag == "li"):
                stray = self.inline(child).strip()
                if stray:
                    lines.append(f"{indent}{stray}")
                continue
            number += 1
            marker = f"{number}." if node.tag == "ol" else "-"
            parts: list[str] = []
            nested: list[str] = []
            for grandchild in child.children:
                if isinstance(grandchild, Element) and grandchild.tag in LIST_TAGS:
                    nested.extend(self.list_lines(grandchild, depth + 1))
                else:
                    parts.append(self.inline(grandchild))
            lines.append(f"{indent}{marker} {_single_line(''.join(parts))}")
            lines.extend(nested)
        return lines

    def inline_children(self, node: Element) -> str:
        return "".join(self.inline(child) for child in node.children)

    def inline(self, node: Node) -> str:
        if isinstance(node, Text):
            return node.text
        if isinstance(node, Preformatted):
            return f"`{node.code}`"
        tag = node.tag
        if tag == "br":
            return "\n"
        if tag in ("strong", "b"):
            return f"**{text_content(node)}**"
        if tag in ("em", "i"):
            return f"*{text_content(node)}*"
        if tag == "code":
            return f"`{text_content(node)}`"
        if tag == "a":
            label = text_content(node)
            href = node.attr("href")
            return label if href is None else f"[{label}]({href})"
        if tag == "img":
            src = node.attr("src")
            if src is None:
                return ""
            return f"![{node.attr('alt') or ''}]({src})"
        if tag == "hr":
            return ""
        if tag not in KNOWN_TAGS:
            self.unsupported.add(tag)
        return self.inline_children(node)


def _convert(html: str) -> AdapterResponse:
    renderer = _MarkdownRenderer()
    markdown = renderer.render(parse_fragment(html))
    warnings: list[str] = []
    if renderer.unsupported:
        warnings.append("UNSUPPORTED_TAGS:" + ",".join(sorted(renderer.unsupported)))
    return AdapterResponse(text=markdown, warnings=warnings)


def html_to_markdown(html: str) -> str:
    """Convert an HTML fragment to Markdown.

    Headings, paragraphs, blockquotes, preformatted code, lists, rules,
    line breaks, emphasis, inline code, links and images are converted.
    Any other tag is dropped and its text kept. Never raises for string
    input.
    """

    return _convert(html).text


class MarkdownAdapter:
    output_format = OutputFormat.MARKDOWN

    def convert(self, source: str) -> AdapterResponse:
        return _convert(source)
