"""Client for the summary web service (generate-summary and send-email routes)."""

import logging
from typing import Any, Optional

import httpx

from meetnotes.core.events import DeliveryReceipt
from meetnotes.core.exceptions import DeliveryError, GenerationError

logger = logging.getLogger("meetnotes.features.service.client")


class SummaryServiceClient:
    """
    Talks to a remote service that owns both the LLM and the mail provider.

    Acts as generator and delivery collaborator at once. Requests carry the full
    transcript or summary every time; nothing is streamed.
    """

    GENERATE_PATH = "/api/generate-summary"
    SEND_PATH = "/api/send-email"

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self._client

    async def _post(self, path: str, payload: dict[str, Any]) -> httpx.Response:
        client = await self._get_client()
        return await client.post(path, json=payload)

    async def generate(self, transcript: str, instructions: str) -> str:
        try:
            response = await self._post(
                self.GENERATE_PATH,
                {"transcript": transcript, "customPrompt": instructions},
            )
        except httpx.HTTPError as e:
            raise GenerationError(f"Summary service unreachable: {e}") from e

        if not response.is_success:
            raise GenerationError(f"Summary service returned {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise GenerationError("Summary service returned invalid JSON") from e

        summary = data.get("summary") if isinstance(data, dict) else None
        if not isinstance(summary, str):
            raise GenerationError("Summary service response has no summary")
        return summary

    async def send(self, recipient: str, body: str) -> DeliveryReceipt:
        try:
            response = await self._post(self.SEND_PATH, {"email": recipient, "summary": body})
        except httpx.HTTPError as e:
            raise DeliveryError(f"Summary service unreachable: {e}") from e

        if not response.is_success:
            raise DeliveryError(f"Summary service returned {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        simulated = bool(data.get("isSimulated"))
        if simulated:
            logger.info(f"Delivery to {recipient} was simulated by the service")
        return DeliveryReceipt(delivered=True, simulated=simulated, message=data.get("message"))

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
