import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Protocol

from meetnotes.core.config import DEFAULT_PROMPT
from meetnotes.core.events import DeliveryReceipt, Notification, NotificationKind, Severity
from meetnotes.features.rendering.markup import render
from meetnotes.features.workflow.loader import declared_type, is_plain_text, read_transcript

logger = logging.getLogger("meetnotes.features.workflow.controller")


class SummaryGenerator(Protocol):
    async def generate(self, transcript: str, instructions: str) -> str:
        ...


class SummaryDelivery(Protocol):
    async def send(self, recipient: str, body: str) -> DeliveryReceipt:
        ...


@dataclass
class WorkflowState:
    """
    Everything the summary form shows, for the lifetime of one session.

    The pending flags are only flipped by the operation that owns them.
    """
    transcript: str = ""
    instruction_prompt: str = DEFAULT_PROMPT
    summary: str = ""
    recipient_email: str = ""
    is_generating: bool = False
    is_sending: bool = False
    is_editing: bool = False

    @property
    def has_summary(self) -> bool:
        return bool(self.summary)

    @property
    def can_generate(self) -> bool:
        return bool(self.transcript.strip()) and not self.is_generating

    @property
    def can_send(self) -> bool:
        return bool(self.recipient_email.strip() and self.summary.strip()) and not self.is_sending


def _notice(kind: NotificationKind, title: str, description: str, destructive: bool = False) -> Notification:
    severity = Severity.DESTRUCTIVE if destructive else Severity.NEUTRAL
    return Notification(kind=kind, title=title, description=description, severity=severity)


class SummaryWorkflow:
    """
    Drives the load → generate → edit → send flow of the summary form.

    Each user action validates its preconditions, calls at most one collaborator and
    reports its outcome as a Notification through *notify*. Collaborator failures never
    escape an operation; they become destructive notifications.
    """

    def __init__(
        self,
        generator: SummaryGenerator,
        delivery: SummaryDelivery,
        notify: Optional[Callable[[Notification], None]] = None,
        on_change: Optional[Callable[[WorkflowState], None]] = None,
        default_prompt: str = DEFAULT_PROMPT,
        default_recipient: str = "",
    ):
        self.generator = generator
        self.delivery = delivery
        self.notify = notify
        self.on_change = on_change
        self.state = WorkflowState(instruction_prompt=default_prompt, recipient_email=default_recipient)

    def _emit(self, notification: Notification) -> Notification:
        if self.notify is not None:
            self.notify(notification)
        return notification

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change(self.state)

    # ------------------------------------------------------------------
    # Transcript
    # ------------------------------------------------------------------
    def load_transcript(self, file_contents: str, declared_mime_type: Optional[str]) -> Notification:
        """
        Replaces the transcript with a plain-text file's contents.
        """
        if not is_plain_text(declared_mime_type):
            logger.warning(f"Rejected transcript file of type {declared_mime_type!r}")
            return self._emit(_notice(
                NotificationKind.UNSUPPORTED_FILE_TYPE,
                "Invalid file type",
                "Please upload a .txt file containing your meeting transcript.",
                destructive=True,
            ))

        self.state.transcript = file_contents
        logger.info(f"Loaded transcript ({len(file_contents)} chars)")
        return self._emit(_notice(
            NotificationKind.FILE_LOADED,
            "File uploaded successfully",
            "Your transcript has been loaded and is ready for processing.",
        ))

    def load_transcript_file(self, path: str | Path) -> Notification:
        """
        Reads *path* and loads it as the transcript. The type check runs before the read.
        """
        mime_type = declared_type(path)
        if not is_plain_text(mime_type):
            return self.load_transcript("", mime_type)

        try:
            contents = read_transcript(path)
        except OSError as e:
            logger.error(f"Could not read transcript file {path}: {e}")
            return self._emit(_notice(
                NotificationKind.FILE_UNREADABLE,
                "Could not read file",
                f"{Path(path).name} could not be opened. Check the path and try again.",
                destructive=True,
            ))
        return self.load_transcript(contents, mime_type)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    async def generate_summary(self) -> Optional[Notification]:
        """
        Asks the generator for a summary of the current transcript.

        Returns None without doing anything while a generation is already pending.
        """
        if self.state.is_generating:
            logger.debug("Generation already in flight, ignoring request")
            return None

        if not self.state.transcript.strip():
            logger.info("Generation requested without a transcript")
            return self._emit(_notice(
                NotificationKind.EMPTY_TRANSCRIPT,
                "No transcript provided",
                "Please upload a transcript file or paste your meeting notes.",
                destructive=True,
            ))

        self.state.is_generating = True
        self._changed()
        try:
            summary = await self.generator.generate(self.state.transcript, self.state.instruction_prompt)
        except Exception as e:
            logger.error(f"Error generating summary: {e}")
            return self._emit(_notice(
                NotificationKind.GENERATION_FAILED,
                "Error generating summary",
                "There was an issue processing your transcript. Please try again.",
                destructive=True,
            ))
        finally:
            self.state.is_generating = False
            self._changed()

        self.state.summary = summary
        self._changed()
        logger.info(f"Summary generated ({len(summary)} chars)")
        return self._emit(_notice(
            NotificationKind.SUMMARY_GENERATED,
            "Summary generated!",
            "Your meeting summary has been created successfully.",
        ))

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def toggle_edit(self) -> bool:
        """
        Switches between the rendered summary and its raw text. Edits are kept as typed.

        Entering edit mode needs a summary; leaving it always works, even when the
        summary was cleared while editing.
        """
        if not self.state.is_editing and not self.state.has_summary:
            return self.state.is_editing
        self.state.is_editing = not self.state.is_editing
        self._changed()
        return self.state.is_editing

    def edit_summary(self, text: str) -> None:
        if not self.state.is_editing:
            return
        self.state.summary = text

    def summary_markup(self) -> Optional[str]:
        """
        HTML for the read-only summary view, or None when there is nothing to show.
        """
        if not self.state.has_summary or self.state.is_editing:
            return None
        return render(self.state.summary)

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------
    async def send_summary(self) -> Optional[Notification]:
        """
        Emails the summary to the recipient.

        Returns None without doing anything while a send is already pending.
        """
        if self.state.is_sending:
            logger.debug("Send already in flight, ignoring request")
            return None

        recipient = self.state.recipient_email
        if not recipient.strip() or not self.state.summary.strip():
            logger.info("Send requested without recipient or summary")
            return self._emit(_notice(
                NotificationKind.MISSING_SEND_FIELDS,
                "Missing information",
                "Please provide an email address and generate a summary first.",
                destructive=True,
            ))

        self.state.is_sending = True
        self._changed()
        try:
            receipt = await self.delivery.send(recipient, self.state.summary)
        except Exception as e:
            logger.error(f"Error sending summary to {recipient}: {e}")
            return self._emit(_notice(
                NotificationKind.SEND_FAILED,
                "Error sending email",
                "There was an issue sending the email. Please try again.",
                destructive=True,
            ))
        finally:
            self.state.is_sending = False
            self._changed()

        if receipt.simulated:
            logger.info(f"Email to {recipient} simulated: {receipt.message}")
            return self._emit(_notice(
                NotificationKind.EMAIL_SIMULATED,
                "Email simulated",
                receipt.message or "",
            ))

        logger.info(f"Summary sent to {recipient}")
        return self._emit(_notice(
            NotificationKind.EMAIL_SENT,
            "Email sent!",
            f"Meeting summary has been sent to {recipient}",
        ))
