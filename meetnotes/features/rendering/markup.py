"""
Render the markdown subset produced by the summarizer into HTML markup.

Supported: **bold**, *italic*, `#`/`##`/`###` headings and `- ` list items.
Every other non-blank line becomes its own paragraph. Anything else is kept
as literal text.
"""

import html
import re
from dataclasses import dataclass

PLAIN = "plain"
BOLD = "bold"
ITALIC = "italic"

HEADING = "heading"
LIST_ITEM = "list_item"
PARAGRAPH = "paragraph"

HEADING_RE = re.compile(r"^(#{1,3}) (.*)$")
LIST_ITEM_RE = re.compile(r"^- (.*)$")
BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
ITALIC_MARKER = "*"

BULLET = "•"

HEADING_CLASSES = {
    1: "text-2xl font-bold mt-4 mb-2",
    2: "text-xl font-semibold mt-4 mb-2",
    3: "text-lg font-semibold mt-4 mb-2",
}
LIST_ITEM_CLASS = "ml-4"
PARAGRAPH_CLASS = "mb-2"


@dataclass(frozen=True)
class Span:
    """
    A run of inline text. Plain spans carry *text*; bold and italic spans
    carry their content as *children*, so italics nest inside bold and a
    whole bold span can sit inside an italic one.
    """
    kind: str
    text: str = ""
    children: tuple["Span", ...] = ()


@dataclass(frozen=True)
class Block:
    """
    One source line classified as a heading, a list item or a paragraph.

    *after_blank* is set when blank lines separated it from the previous block.
    """
    kind: str
    spans: tuple[Span, ...] = ()
    level: int = 0
    after_blank: bool = False


def _runs(units: list) -> tuple[Span, ...]:
    """
    Merge consecutive characters into plain spans; built spans pass through.
    """
    spans: list[Span] = []
    chars: list[str] = []
    for unit in units:
        if isinstance(unit, Span):
            if chars:
                spans.append(Span(PLAIN, "".join(chars)))
                chars = []
            spans.append(unit)
        else:
            chars.append(unit)
    if chars:
        spans.append(Span(PLAIN, "".join(chars)))
    return tuple(spans)


def _closing_marker(units: list, start: int) -> int | None:
    for index in range(start + 2, len(units)):
        if units[index] == ITALIC_MARKER:
            return index
    return None


def _italics(units: list) -> tuple[Span, ...]:
    """
    Pair single markers left to right, shortest non-empty content first.

    *units* are characters, or bold spans that were already matched; a bold
    span is indivisible, so an italic pair either wraps it whole or leaves it
    alone.
    """
    out: list = []
    index = 0
    while index < len(units):
        unit = units[index]
        if unit == ITALIC_MARKER:
            close = _closing_marker(units, index)
            if close is not None:
                out.append(Span(ITALIC, children=_runs(units[index + 1:close])))
                index = close + 1
                continue
        out.append(unit)
        index += 1
    return _runs(out)


def parse_inline(line: str) -> tuple[Span, ...]:
    """
    Split a single line into plain, bold and italic spans.

    Bold markers are consumed first. Italic markers are then paired inside
    each bold span and, separately, across the rest of the line, where a
    bold span counts as one unit. Tags therefore always nest:
    ``*a **b** c*`` wraps the bold span in the italic one, while the single
    marker in ``**a *b** c*`` has no partner on its side and stays literal.
    """
    units: list = []
    pos = 0
    for match in BOLD_RE.finditer(line):
        units.extend(line[pos:match.start()])
        units.append(Span(BOLD, children=_italics(list(match.group(1)))))
        pos = match.end()
    units.extend(line[pos:])
    return _italics(units)


def scan(markdown: str) -> list[Block]:
    """
    Classify each line of *markdown* into a block.

    Each non-blank line is a block of its own, so a heading or list item is
    never inside a paragraph. Blank lines produce no block.
    """
    blocks: list[Block] = []
    after_blank = False

    for line in markdown.replace("\r\n", "\n").split("\n"):
        if not line.strip():
            after_blank = bool(blocks)
            continue

        heading = HEADING_RE.match(line)
        item = None if heading else LIST_ITEM_RE.match(line)
        if heading:
            block = Block(HEADING, parse_inline(heading.group(2)), len(heading.group(1)), after_blank)
        elif item:
            block = Block(LIST_ITEM, parse_inline(item.group(1)), after_blank=after_blank)
        else:
            block = Block(PARAGRAPH, parse_inline(line), after_blank=after_blank)
        blocks.append(block)
        after_blank = False
    return blocks


def _span_html(span: Span, escape: bool) -> str:
    if span.kind == PLAIN:
        return html.escape(span.text, quote=False) if escape else span.text
    inner = "".join(_span_html(child, escape) for child in span.children)
    tag = "strong" if span.kind == BOLD else "em"
    return f"<{tag}>{inner}</{tag}>"


def _block_html(block: Block, escape: bool) -> str:
    content = "".join(_span_html(span, escape) for span in block.spans)
    if block.kind == HEADING:
        tag = f"h{block.level}"
        return f'<{tag} class="{HEADING_CLASSES[block.level]}">{content}</{tag}>'
    if block.kind == LIST_ITEM:
        return f'<li class="{LIST_ITEM_CLASS}">{BULLET} {content}</li>'
    return f'<p class="{PARAGRAPH_CLASS}">{content}</p>'


def render(markdown: str, escape: bool = False) -> str:
    """
    Convert *markdown* to HTML.

    The input must be markdown source; feeding rendered output back in
    is not supported. With *escape*, ``&``, ``<`` and ``>`` in the text are
    escaped, which is what email bodies need.
    """
    if not markdown:
        return ""
    return "\n".join(_block_html(block, escape) for block in scan(markdown))
