"""
HTTP client for the Sales-Coach API.

Async wrapper used by frontends and scripts. Coaching suggestions are
returned already bucketed into questions, next steps and tips.

Dependencies: httpx, sales_coach.core.coaching
System role: Client side of the HTTP contract
"""

import logging
from pathlib import Path
from typing import Any

import httpx

from sales_coach.core.coaching.categorizer import categorize_suggestions
from sales_coach.core.exceptions import ProviderError
from sales_coach.models.coaching import CoachingSuggestionSet
from sales_coach.models.conversation import ConversationMessage

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 60.0


class SalesCoachClient:
    """Async client for the Sales-Coach HTTP API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: Server root URL
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout, transport=self._transport)

    async def _post(self, path: str, **kwargs: Any) -> dict[str, Any]:
        async with self._client() as client:
            try:
                response = await client.post(path, **kwargs)
            except httpx.HTTPError as e:
                logger.error(f"{__name__}:_post - {path} request failed: {type(e).__name__}: {e}")
                raise ProviderError(str(e), provider="sales_coach_api", code=type(e).__name__) from e

        if response.is_success:
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = body.get("error") or response.reason_phrase
        if body.get("message"):
            message = f"{message}: {body['message']}"
        logger.warning(f"{__name__}:_post - {path} returned {response.status_code}: {message}")
        raise ProviderError(
            message,
            provider="sales_coach_api",
            code=str(response.status_code),
            details={"path": path},
        )

    async def ask(self, question: str) -> str:
        """Ask a question and return the answer text."""
        body = await self._post("/ask", json={"question": question})
        return body["answer"]

    async def get_coaching_suggestions(
        self,
        conversation: list[ConversationMessage],
    ) -> CoachingSuggestionSet:
        """Request coaching suggestions and bucket them by category."""
        payload = {
            "conversation": [message.model_dump(mode="json") for message in conversation],
        }
        body = await self._post("/coaching", json=payload)
        return categorize_suggestions(body.get("suggestions", []))

    async def add_knowledge(self, text: str, source: str | None = None) -> str:
        """Add knowledge text; returns the server's confirmation message."""
        payload: dict[str, Any] = {"text": text}
        if source:
            payload["source"] = source
        body = await self._post("/knowledge/add", json=payload)
        return body["message"]

    async def upload_knowledge(self, path: str | Path) -> str:
        """Upload a text file as knowledge; returns the server's confirmation message."""
        file_path = Path(path)
        content = file_path.read_bytes()
        files = {"file": (file_path.name, content, "text/plain")}
        body = await self._post("/knowledge/upload", files=files)
        return body["message"]
