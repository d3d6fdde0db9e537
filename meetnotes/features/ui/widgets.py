from rich.text import Text
from textual.widgets import Static

from meetnotes.features.rendering.console import to_rich_text


class SummaryView(Static):
    """
    Read-only view of a generated summary.

    Renders the summary's markdown subset (headings, bullets, bold, italic) as styled text.
    """
    def __init__(self, summary: str = "", **kwargs):
        self.summary = summary
        super().__init__(**kwargs)

    def show(self, summary: str) -> None:
        self.summary = summary
        self.refresh(layout=True)

    def render(self) -> Text:
        return to_rich_text(self.summary)
