"""Test fixtures for meetnotes."""

import os

import pytest

# Keep a developer's .env / config.yaml from leaking into tests
os.environ.setdefault("MEETNOTES_WORKFLOW__GENERATOR", "llm")
os.environ.setdefault("MEETNOTES_WORKFLOW__DELIVERY", "resend")

from meetnotes.core.events import DeliveryReceipt
from meetnotes.features.workflow.controller import SummaryWorkflow


class FakeGenerator:
    """Records calls and returns a canned summary (or raises)."""

    def __init__(self, summary: str = "**Decision**: proceed", error: Exception | None = None):
        self.summary = summary
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate(self, transcript: str, instructions: str) -> str:
        self.calls.append((transcript, instructions))
        if self.error is not None:
            raise self.error
        return self.summary


class FakeDelivery:
    """Records calls and returns a canned receipt (or raises)."""

    def __init__(self, receipt: DeliveryReceipt | None = None, error: Exception | None = None):
        self.receipt = receipt or DeliveryReceipt()
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def send(self, recipient: str, body: str) -> DeliveryReceipt:
        self.calls.append((recipient, body))
        if self.error is not None:
            raise self.error
        return self.receipt


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def delivery():
    return FakeDelivery()


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def workflow(generator, delivery, notifications):
    return SummaryWorkflow(
        generator=generator,
        delivery=delivery,
        notify=notifications.append,
        default_recipient="team@example.com",
    )
