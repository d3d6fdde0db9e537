import logging
from typing import Optional

from textual.app import App

from meetnotes.core.config import settings
from meetnotes.core.session import build_workflow, recipient_notice
from meetnotes.features.ui.screens.summarizer import SummarizerScreen
from meetnotes.features.workflow.controller import SummaryWorkflow

logger = logging.getLogger("meetnotes.ui.app")

class MeetNotesApp(App):
    """
    AI Meeting Notes Summarizer.

    Upload a meeting transcript, get an AI-powered summary and share it by email.
    """
    TITLE = "AI Meeting Notes Summarizer"
    SUB_TITLE = "Upload your meeting transcript and get an AI-powered summary"

    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, workflow: Optional[SummaryWorkflow] = None, notice: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.workflow = workflow
        self.notice = notice

    def on_mount(self) -> None:
        if self.workflow is None:
            self.workflow = build_workflow(settings)
            self.notice = recipient_notice(settings)
        logger.info("Opening summarizer screen")
        self.push_screen(SummarizerScreen(self.workflow, notice=self.notice))

if __name__ == "__main__":
    app = MeetNotesApp()
    app.run()
