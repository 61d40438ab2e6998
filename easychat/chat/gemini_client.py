"""HTTP client for the Gemini generateContent endpoint.

One POST per call, no retries, no streaming.
"""

import logging

import httpx

from easychat.chat.config import ChatConfig
from easychat.errors import MalformedResponseError, ServiceError
from easychat.models import OutboundRequest

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Service-provided error message, or a generic status-coded one."""
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return f"API request failed with status {response.status_code}"


def reply_text(data: object) -> str | None:
    """Pull ``candidates[0].content.parts[0].text`` out of a decoded body."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) and text else None


class GeminiClient:
    """Sends assembled requests to the generation service.

    Args:
        config: Endpoint, model, credential and timeout.
        transport: Optional httpx transport, used to stub the service in tests.
    """

    def __init__(
        self,
        config: ChatConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    async def generate(self, request: OutboundRequest) -> str:
        """Send one request and return the reply text.

        Raises:
            ServiceError: On a non-success status or a transport failure.
            MalformedResponseError: If a success body holds no reply text.
        """
        payload = request.to_payload()
        logger.debug(
            f"Sending {len(payload['contents'])} contents to {self._config.model_name}"
        )

        async with httpx.AsyncClient(
            timeout=self._config.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(
                    self._config.endpoint,
                    params={"key": self._config.api_key},
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
            except httpx.RequestError as e:
                raise ServiceError(f"Connection failed: {e}") from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning(f"Generation request failed ({response.status_code}): {message}")
            raise ServiceError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError("Response body is not valid JSON.") from e

        text = reply_text(data)
        if text is None:
            logger.error(f"Unexpected API response format: {data}")
            raise MalformedResponseError("No text found in API response.")
        return text
