from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Severity(str, Enum):
    NEUTRAL = "neutral"
    DESTRUCTIVE = "destructive"


class NotificationKind(str, Enum):
    FILE_LOADED = "file_loaded"
    UNSUPPORTED_FILE_TYPE = "unsupported_file_type"
    FILE_UNREADABLE = "file_unreadable"
    EMPTY_TRANSCRIPT = "empty_transcript"
    SUMMARY_GENERATED = "summary_generated"
    GENERATION_FAILED = "generation_failed"
    MISSING_SEND_FIELDS = "missing_send_fields"
    EMAIL_SENT = "email_sent"
    EMAIL_SIMULATED = "email_simulated"
    SEND_FAILED = "send_failed"


@dataclass(frozen=True)
class Notification:
    """
    Outcome of a user action, shown once as an ephemeral toast.
    """
    kind: NotificationKind
    title: str
    description: str
    severity: Severity = Severity.NEUTRAL

    @property
    def is_destructive(self) -> bool:
        return self.severity is Severity.DESTRUCTIVE


@dataclass(frozen=True)
class DeliveryReceipt:
    """
    Result of handing a summary to a delivery collaborator.

    *simulated* means the request was accepted but nothing reached the
    recipient; *message* then explains why.
    """
    delivered: bool = True
    simulated: bool = False
    message: Optional[str] = None
