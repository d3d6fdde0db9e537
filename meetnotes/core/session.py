import logging
from typing import Callable, Optional

from meetnotes.core.config import Settings
from meetnotes.core.events import Notification
from meetnotes.core.exceptions import ConfigurationError
from meetnotes.features.analysis.llm import LLMClient, LLMClientSettings
from meetnotes.features.analysis.summarization import Summarizer
from meetnotes.features.delivery.resend import SANDBOX_MESSAGE, ResendMailer
from meetnotes.features.service.client import SummaryServiceClient
from meetnotes.features.workflow.controller import (
    SummaryDelivery,
    SummaryGenerator,
    SummaryWorkflow,
    WorkflowState,
)

logger = logging.getLogger("meetnotes.core.session")

GENERATORS = ("llm", "service")
DELIVERIES = ("resend", "service")


def _secret(value) -> Optional[str]:
    return value.get_secret_value() if value else None


def build_generator(settings: Settings, service: Optional[SummaryServiceClient] = None) -> SummaryGenerator:
    name = settings.workflow.generator
    if name == "llm":
        llm_settings = LLMClientSettings(
            api_key=_secret(settings.models.llm_api_key),
            base_url=settings.models.llm_base_url,
            model=settings.models.llm_summary,
            temperature=settings.models.temperature,
        )
        return Summarizer(LLMClient(llm_settings))
    if name == "service":
        return service or SummaryServiceClient(settings.service.base_url, settings.service.request_timeout)
    raise ConfigurationError(f"Unknown summary generator {name!r}, expected one of {GENERATORS}")


def build_delivery(settings: Settings, service: Optional[SummaryServiceClient] = None) -> SummaryDelivery:
    name = settings.workflow.delivery
    if name == "resend":
        api_key = _secret(settings.delivery.resend_api_key)
        if not api_key:
            logger.warning("Resend API key not configured, sending will fail until it is set.")
        return ResendMailer(
            api_key=api_key or "",
            sender=settings.delivery.sender,
            subject=settings.delivery.subject,
            timeout=settings.delivery.request_timeout,
        )
    if name == "service":
        return service or SummaryServiceClient(settings.service.base_url, settings.service.request_timeout)
    raise ConfigurationError(f"Unknown delivery backend {name!r}, expected one of {DELIVERIES}")


def recipient_notice(settings: Settings) -> Optional[str]:
    """
    Text shown beside the recipient field when the backend limits who can receive mail.
    """
    if settings.workflow.delivery == "resend":
        return SANDBOX_MESSAGE
    return None


def build_workflow(
    settings: Settings,
    notify: Optional[Callable[[Notification], None]] = None,
    on_change: Optional[Callable[[WorkflowState], None]] = None,
) -> SummaryWorkflow:
    """
    Wires the configured collaborators into a fresh workflow for one session.
    """
    # One client serves both routes when generator and delivery both use the service.
    service = None
    if "service" in (settings.workflow.generator, settings.workflow.delivery):
        service = SummaryServiceClient(settings.service.base_url, settings.service.request_timeout)

    generator = build_generator(settings, service)
    delivery = build_delivery(settings, service)
    logger.info(
        f"Workflow ready (generator={settings.workflow.generator}, delivery={settings.workflow.delivery})"
    )
    return SummaryWorkflow(
        generator=generator,
        delivery=delivery,
        notify=notify,
        on_change=on_change,
        default_prompt=settings.workflow.default_prompt,
        default_recipient=settings.workflow.default_recipient,
    )
