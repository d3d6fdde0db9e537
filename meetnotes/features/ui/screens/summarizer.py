import logging
from typing import Optional

from textual import work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label, TextArea

from meetnotes.core.events import Notification, NotificationKind
from meetnotes.features.ui.widgets import SummaryView
from meetnotes.features.workflow.controller import SummaryWorkflow, WorkflowState

logger = logging.getLogger("meetnotes.ui.screens.summarizer")

class SummarizerScreen(Screen):
    """
    The summary form: load or paste a transcript, generate a summary, edit it and email it.

    All state lives in the SummaryWorkflow; this screen only mirrors it into widgets and
    forwards user input back.
    """
    CSS = """
    #form {
        padding: 0 2;
    }

    .section-title {
        text-style: bold;
        color: $accent;
        margin-top: 1;
    }

    #file-row {
        height: auto;
    }

    #file-path {
        width: 1fr;
    }

    #transcript {
        height: 12;
    }

    #instructions {
        height: 5;
    }

    #btn-generate {
        width: 100%;
        margin: 1 0;
    }

    #summary-panel, #email-panel {
        height: auto;
        border: solid $secondary;
        padding: 0 1;
        margin-bottom: 1;
    }

    #summary-header {
        height: auto;
    }

    #summary-header Label {
        width: 1fr;
    }

    #summary-view {
        background: $surface;
        padding: 1;
    }

    #summary-editor {
        height: 16;
    }

    #recipient-notice {
        color: $text-muted;
    }

    #btn-send {
        width: 100%;
        margin-top: 1;
    }
    """

    BINDINGS = [("ctrl+g", "generate", "Generate"), ("ctrl+e", "toggle_edit", "Edit/Save")]

    def __init__(self, workflow: SummaryWorkflow, notice: Optional[str] = None):
        super().__init__()
        self.workflow = workflow
        self.notice = notice

    def compose(self) -> ComposeResult:
        state = self.workflow.state
        yield Header(show_clock=True)
        with VerticalScroll(id="form"):
            yield Label("Upload Transcript", classes="section-title")
            with Horizontal(id="file-row"):
                yield Input(placeholder="Path to a .txt transcript…", id="file-path")
                yield Button("Load", id="btn-load")
            yield Label("Or paste your transcript here")
            yield TextArea(state.transcript, id="transcript")

            yield Label("Custom Instructions", classes="section-title")
            yield TextArea(state.instruction_prompt, id="instructions")

            yield Button("Generate AI Summary", id="btn-generate", variant="primary")

            with Vertical(id="summary-panel"):
                with Horizontal(id="summary-header"):
                    yield Label("Generated Summary", classes="section-title")
                    yield Button("Edit", id="btn-edit")
                yield SummaryView(state.summary, id="summary-view")
                yield TextArea(id="summary-editor")

            with Vertical(id="email-panel"):
                yield Label("Share Summary", classes="section-title")
                yield Input(value=state.recipient_email, placeholder="Enter email address...", id="recipient")
                if self.notice:
                    yield Label(self.notice, id="recipient-notice")
                yield Button("Send Summary", id="btn-send", variant="success")
        yield Footer()

    def on_mount(self) -> None:
        self.workflow.notify = self.show_notification
        self.workflow.on_change = self.on_workflow_change
        self.refresh_controls()

    # ------------------------------------------------------------------
    # Workflow → widgets
    # ------------------------------------------------------------------
    def show_notification(self, notification: Notification) -> None:
        severity = "error" if notification.is_destructive else "information"
        self.notify(notification.description, title=notification.title, severity=severity)

    def on_workflow_change(self, state: WorkflowState) -> None:
        # The workflow replaced the summary (entering edit mode or a new generation).
        editor = self.query_one("#summary-editor", TextArea)
        if state.is_editing and editor.text != state.summary:
            editor.load_text(state.summary)
        self.refresh_controls()

    def refresh_controls(self) -> None:
        state = self.workflow.state

        generate = self.query_one("#btn-generate", Button)
        generate.disabled = not state.can_generate
        generate.label = "Generating Summary..." if state.is_generating else "Generate AI Summary"

        # Stays open while editing so an emptied summary can still be saved.
        self.query_one("#summary-panel").display = state.has_summary or state.is_editing
        self.query_one("#email-panel").display = state.has_summary

        self.query_one("#btn-edit", Button).label = "Save" if state.is_editing else "Edit"
        view = self.query_one("#summary-view", SummaryView)
        view.display = not state.is_editing
        if not state.is_editing:
            view.show(state.summary)
        self.query_one("#summary-editor", TextArea).display = state.is_editing

        send = self.query_one("#btn-send", Button)
        send.disabled = not state.can_send
        send.label = "Sending Email..." if state.is_sending else "Send Summary"

    # ------------------------------------------------------------------
    # Widgets → workflow
    # ------------------------------------------------------------------
    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        text = event.text_area.text
        if event.text_area.id == "transcript":
            self.workflow.state.transcript = text
        elif event.text_area.id == "instructions":
            self.workflow.state.instruction_prompt = text
        elif event.text_area.id == "summary-editor":
            self.workflow.edit_summary(text)
        self.refresh_controls()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "recipient":
            self.workflow.state.recipient_email = event.value
            self.refresh_controls()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "file-path":
            self.load_file()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-load":
            self.load_file()
        elif event.button.id == "btn-generate":
            self.action_generate()
        elif event.button.id == "btn-edit":
            self.action_toggle_edit()
        elif event.button.id == "btn-send":
            self.send_summary()

    def load_file(self) -> None:
        path = self.query_one("#file-path", Input).value.strip()
        if not path:
            return
        notification = self.workflow.load_transcript_file(path)
        if notification.kind is NotificationKind.FILE_LOADED:
            self.query_one("#transcript", TextArea).load_text(self.workflow.state.transcript)
        self.refresh_controls()

    def action_generate(self) -> None:
        self.generate_summary()

    def action_toggle_edit(self) -> None:
        self.workflow.toggle_edit()
        self.refresh_controls()

    @work(exclusive=False, group="generate")
    async def generate_summary(self) -> None:
        logger.info("Generate requested")
        await self.workflow.generate_summary()

    @work(exclusive=False, group="send")
    async def send_summary(self) -> None:
        logger.info("Send requested")
        await self.workflow.send_summary()
