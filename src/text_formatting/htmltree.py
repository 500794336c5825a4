"""Pattern-based reader for the small HTML subset the Markdown adapter supports.

Tags are found with regular expressions only; there is no DOM library
involved. The reader is forgiving: stray closing tags are ignored, open
elements are closed at the end of input, and anything that looks like
``<...>`` but is not a named tag (comments, doctypes, ``a < b > c``) is
dropped the same way :func:`text_formatting.utils.strip_tags` drops it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

from .utils import strip_tags, unescape_html


TOKEN_RE = re.compile(r"<(/?)([A-Za-z][A-Za-z0-9]*)([^>]*)>|<[^>]+>")
ATTRIBUTE_RE = re.compile(r'([A-Za-z_:][-A-Za-z0-9_:.]*)\s*=\s*"([^"]*)"')
PRE_END_RE = re.compile(r"</pre\s*>", re.IGNORECASE)
CODE_WRAPPER_RE = re.compile(r"^\s*<code\b[^>]*>(.*?)</code\s*>\s*$", re.IGNORECASE | re.DOTALL)

VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)
HEADING_TAGS = {f"h{level}": level for level in range(1, 7)}
BLOCK_TAGS = frozenset({"p", "blockquote", "ul", "ol", "hr", *HEADING_TAGS})
INLINE_TAGS = frozenset({"strong", "b", "em", "i", "code", "a", "img", "br"})
LIST_TAGS = frozenset({"ul", "ol"})
# An opening tag of the key implicitly closes an open element of the value.
IMPLICIT_CLOSE = {"li": "li", "p": "p"}
# Opening tags deeper than this are dropped and their content kept in the
# innermost element, so rendering stays within the interpreter recursion limit.
MAX_DEPTH = 128


@dataclass(slots=True)
class Text:
    value: str

    @property
    def text(self) -> str:
        return unescape_html(self.value)


@dataclass(slots=True)
class Preformatted:
    """Literal contents of a ``<pre>`` block, already decoded."""

    code: str


@dataclass(slots=True)
class Element:
    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)

    def attr(self, name: str) -> str | None:
        value = self.attrs.get(name)
        return None if value is None else unescape_html(value)


Node = Union[Text, Preformatted, Element]


def parse_attributes(source: str) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for name, value in ATTRIBUTE_RE.findall(source):
        attrs.setdefault(name.lower(), value)
    return attrs


def _decode_preformatted(raw: str) -> str:
    wrapped = CODE_WRAPPER_RE.match(raw)
    if wrapped:
        raw = wrapped.group(1)
    return unescape_html(strip_tags(raw))


def parse_fragment(html: str) -> Element:
    """Read *html* into a tree rooted at a synthetic ``#root`` element."""

    root = Element("#root")
    stack: list[Element] = [root]
    position = 0

    def append_text(value: str) -> None:
        if value:
            stack[-1].children.append(Text(value))

    def close(tag: str) -> None:
        for depth in range(len(stack) - 1, 0, -1):
            if stack[depth].tag == tag:
                del stack[depth:]
                return

    while True:
        match = TOKEN_RE.search(html, position)
        if match is None:
            append_text(html[position:])
            break
        append_text(html[position : match.start()])
        position = match.end()
        closing, name, rest = match.groups()
        if name is None:
            continue
        tag = name.lower()
        if closing:
            close(tag)
            continue
        if tag == "pre":
            end = PRE_END_RE.search(html, position)
            stop = end.start() if end else len(html)
            stack[-1].children.append(Preformatted(_decode_preformatted(html[position:stop])))
            position = end.end() if end else len(html)
            continue
        void = tag in VOID_TAGS or rest.rstrip().endswith("/")
        if not void and len(stack) > MAX_DEPTH:
            continue
        implicit = IMPLICIT_CLOSE.get(tag)
        if implicit and stack[-1].tag == implicit:
            stack.pop()
        element = Element(tag, parse_attributes(rest))
        stack[-1].children.append(element)
        if not void:
            stack.append(element)
    return root


def text_content(node: Node) -> str:
    """Plain decoded text of *node*, with ``<br>`` kept as a newline."""

    if isinstance(node, Text):
        return node.text
    if isinstance(node, Preformatted):
        return node.code
    if node.tag == "br":
        return "\n"
    return "".join(text_content(child) for child in node.children)


def is_block(node: Node) -> bool:
    if isinstance(node, Preformatted):
        return True
    return isinstance(node, Element) and node.tag in BLOCK_TAGS


__all__ = [
    "Element",
    "Node",
    "Preformatted",
    "Text",
    "BLOCK_TAGS",
    "HEADING_TAGS",
    "INLINE_TAGS",
    "LIST_TAGS",
    "is_block",
    "parse_attributes",
    "parse_fragment",
    "text_content",
]
