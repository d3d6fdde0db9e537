from rich.text import Text

from meetnotes.features.rendering.markup import (
    BOLD,
    BULLET,
    HEADING,
    ITALIC,
    LIST_ITEM,
    Block,
    Span,
    scan,
)

HEADING_STYLES = {
    1: "bold underline",
    2: "bold",
    3: "bold italic",
}


def _combine(base_style: str, extra: str) -> str:
    if extra in base_style.split():
        return base_style
    return f"{base_style} {extra}".strip()


def _append_spans(text: Text, spans: tuple[Span, ...], base_style: str = "") -> None:
    for span in spans:
        if span.kind == BOLD:
            _append_spans(text, span.children, _combine(base_style, "bold"))
        elif span.kind == ITALIC:
            _append_spans(text, span.children, _combine(base_style, "italic"))
        else:
            text.append(span.text, style=base_style or None)


def _separator(previous: Block, current: Block) -> str:
    if current.after_blank:
        return "\n\n"
    if current.kind == HEADING and previous.kind != HEADING:
        return "\n\n"
    return "\n"


def to_rich_text(markdown: str) -> Text:
    """
    Render *markdown* as a styled rich Text for the terminal summary view.
    """
    text = Text()
    previous = None
    for block in scan(markdown or ""):
        if previous is not None:
            text.append(_separator(previous, block))

        if block.kind == HEADING:
            _append_spans(text, block.spans, HEADING_STYLES[block.level])
        elif block.kind == LIST_ITEM:
            text.append(f"{BULLET} ", style="bold")
            _append_spans(text, block.spans)
        else:
            _append_spans(text, block.spans)
        previous = block
    return text
