"""Markdown subset renderer for model-generated analysis text

Recognized vocabulary:
- ``### text`` and ``## text`` line headings
- ``**text**`` bold spans (no nesting)
- ``* text`` unordered list items; consecutive items share one ``<ul>``

Rendering is split into a line-oriented tokenizer producing tagged blocks and a
renderer mapping those blocks to HTML. Literal text is escaped before it is
wrapped, and syntax characters left in literal text (``*`` anywhere, ``#`` or a
backtick at the start of a line) are written as numeric entities. The
tokenizer also accepts the renderer's own output, so rendering an
already rendered fragment returns it unchanged.
"""

import html
import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union


@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class Bold:
    text: str


Span = Union[PlainText, Bold]


@dataclass(frozen=True)
class Heading:
    level: int
    spans: Tuple[Span, ...]


@dataclass(frozen=True)
class ListItem:
    spans: Tuple[Span, ...]


@dataclass(frozen=True)
class TextLine:
    spans: Tuple[Span, ...]


Block = Union[Heading, ListItem, TextLine]

_FENCE = re.compile(r"^```[\w-]*\s*$")
_MD_HEADING = re.compile(r"^(#{2,3}) (.*)$")
_MD_LIST_ITEM = re.compile(r"^\* (.*)$")
_HTML_HEADING = re.compile(r"^<h([23])>(.*)</h\1>$")
_HTML_LIST_ITEM = re.compile(r"^(?:<ul>)?<li>(.*)</li>(?:</ul>)?$")
_INLINE_BOLD = re.compile(r"\*\*([^*]+)\*\*|<strong>(.*?)</strong>")


def _parse_inline(text: str) -> Tuple[Span, ...]:
    """Split a line into plain and bold spans, decoding any escaped entities"""
    spans: List[Span] = []
    pos = 0
    for match in _INLINE_BOLD.finditer(text):
        if match.start() > pos:
            spans.append(PlainText(html.unescape(text[pos:match.start()])))
        bold = match.group(1) if match.group(1) is not None else match.group(2)
        spans.append(Bold(html.unescape(bold)))
        pos = match.end()
    if pos < len(text):
        spans.append(PlainText(html.unescape(text[pos:])))
    return tuple(spans)


def _parse_line(line: str) -> Block | None:
    if _FENCE.match(line):
        return None

    heading = _MD_HEADING.match(line)
    if heading:
        return Heading(level=len(heading.group(1)), spans=_parse_inline(heading.group(2).strip()))

    item = _MD_LIST_ITEM.match(line)
    if item:
        return ListItem(spans=_parse_inline(item.group(1).strip()))

    # Already rendered markup
    heading = _HTML_HEADING.match(line)
    if heading:
        return Heading(level=int(heading.group(1)), spans=_parse_inline(heading.group(2)))

    item = _HTML_LIST_ITEM.match(line)
    if item:
        return ListItem(spans=_parse_inline(item.group(1)))

    return TextLine(spans=_parse_inline(line))


def tokenize_markdown(text: str) -> List[Block]:
    """Turn text into one block per line (code fence lines are dropped)"""
    lines = text.replace("\r\n", "\n").split("\n")
    blocks = []
    for line in lines:
        block = _parse_line(line)
        if block is not None:
            blocks.append(block)
    return blocks


def _escape(text: str) -> str:
    return html.escape(text, quote=False).replace("*", "&#42;")


def _escape_line_start(line: str) -> str:
    if line.startswith("#"):
        return "&#35;" + line[1:]
    if line.startswith("`"):
        return "&#96;" + line[1:]
    return line


def _render_spans(spans: Sequence[Span]) -> str:
    parts = []
    for span in spans:
        if isinstance(span, Bold):
            parts.append(f"<strong>{_escape(span.text)}</strong>")
        else:
            parts.append(_escape(span.text))
    return "".join(parts)


def render_tokens(blocks: Sequence[Block]) -> str:
    """Map blocks to HTML, one output line per block, merging adjacent list items"""
    lines: List[str] = []
    items: List[str] = []

    def flush_list() -> None:
        if items:
            lines.append("<ul>" + "\n".join(items) + "</ul>")
            items.clear()

    for block in blocks:
        if isinstance(block, ListItem):
            items.append(f"<li>{_render_spans(block.spans)}</li>")
            continue

        flush_list()
        if isinstance(block, Heading):
            lines.append(f"<h{block.level}>{_render_spans(block.spans)}</h{block.level}>")
        else:
            lines.append(_escape_line_start(_render_spans(block.spans)))

    flush_list()
    return "\n".join(lines)


def render_markdown(text: str) -> str:
    """Render the supported Markdown subset to an HTML fragment"""
    return render_tokens(tokenize_markdown(text))
