"""Email delivery through the Resend HTTP API (no resend SDK dependency)."""

import logging
from typing import Optional

import httpx

from meetnotes.core.events import DeliveryReceipt
from meetnotes.core.exceptions import DeliveryError
from meetnotes.features.rendering.markup import render

logger = logging.getLogger("meetnotes.features.delivery.resend")

SANDBOX_MESSAGE = (
    "Resend free tier only delivers to the account owner's address. "
    "Verify a domain at resend.com/domains to send to other recipients."
)


class ResendMailer:
    """Sends a summary as a plain-text + HTML email."""

    API_BASE = "https://api.resend.com"

    def __init__(
        self,
        api_key: str,
        sender: str,
        subject: str = "Meeting Summary",
        timeout: Optional[float] = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._sender = sender
        self._subject = subject
        self._timeout = timeout
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key and self._sender)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.API_BASE,
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=self._timeout,
            )
        return self._client

    def build_payload(self, recipient: str, body: str) -> dict:
        return {
            "from": self._sender,
            "to": [recipient],
            "subject": self._subject,
            "text": body,
            "html": render(body, escape=True),
        }

    async def send(self, recipient: str, body: str) -> DeliveryReceipt:
        if not self.is_configured:
            raise DeliveryError("Resend API key or sender is not configured")

        client = await self._get_client()
        try:
            response = await client.post("/emails", json=self.build_payload(recipient, body))
        except httpx.HTTPError as e:
            raise DeliveryError(f"Resend unreachable: {e}") from e

        if response.is_success:
            email_id = _json_body(response).get("id")
            logger.info(f"Resend accepted email {email_id} for {recipient}")
            return DeliveryReceipt(delivered=True, simulated=False)

        error = _json_body(response)
        # Sandbox accounts reject any recipient other than the owner.
        if response.status_code == 403 and error.get("name") == "validation_error":
            logger.warning(f"Resend sandbox refused {recipient}: {error.get('message')}")
            message = error.get("message") or SANDBOX_MESSAGE
            return DeliveryReceipt(delivered=True, simulated=True, message=message)

        raise DeliveryError(
            f"Resend returned {response.status_code}: {error.get('message', response.text)}"
        )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def _json_body(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
