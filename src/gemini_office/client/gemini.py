"""Gemini-backed chat client."""

from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types

from gemini_office.config.types import FrozenConfig
from gemini_office.constants import (
    EMPTY_RESPONSE_TEXT,
    MISSING_KEY_MESSAGE,
    NO_TEXT_RESPONSE_TEXT,
)
from gemini_office.exceptions import MissingKeyError
from gemini_office.telemetry import TelemetryContext, TelemetryContextProtocol

from .error_handler import translate_error
from .models import ChatRequest
from .prompts import build_parts, system_instruction

log = logging.getLogger(__name__)


def extract_text(response: Any) -> str:
    """First text of the first candidate, with the canned fallbacks."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return EMPTY_RESPONSE_TEXT
    content = getattr(candidates[0], "content", None)
    for part in getattr(content, "parts", None) or ():
        text = getattr(part, "text", None)
        if text:
            return text
    return NO_TEXT_RESPONSE_TEXT


class GeminiChatClient:
    """Sends one chat request to Gemini and returns the reply text.

    Example:
        client = GeminiChatClient(resolve_frozen_config())
        text = await client.generate(ChatRequest("Summarize", HostKind.TEXT_EDITOR))
    """

    def __init__(
        self,
        config: FrozenConfig | None = None,
        *,
        sdk_client: genai.Client | None = None,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        self.config = config or FrozenConfig()
        self._sdk_client = sdk_client
        self._telemetry = telemetry or TelemetryContext()

    def _client(self) -> genai.Client:
        if self._sdk_client is None:
            if not self.config.api_key:
                raise MissingKeyError(MISSING_KEY_MESSAGE)
            self._sdk_client = genai.Client(
                api_key=self.config.api_key,
                http_options=types.HttpOptions(
                    timeout=int(self.config.timeout_seconds * 1000)
                ),
            )
        return self._sdk_client

    async def generate(self, request: ChatRequest) -> str:
        """Return the model's reply text.

        Raises:
            MissingKeyError: No API key is configured.
            APIError: The endpoint rejected the request.
            NetworkError: The endpoint could not be reached.
        """
        client = self._client()
        parts = build_parts(request)
        log.debug(
            "Sending request to %s with %d part(s) for %s host",
            self.config.model,
            len(parts),
            request.host_kind.value,
        )
        with self._telemetry("chat.generate", model=self.config.model):
            try:
                response = await client.aio.models.generate_content(
                    model=self.config.model,
                    contents=parts,
                    config=types.GenerateContentConfig(
                        system_instruction=system_instruction(request.host_kind),
                    ),
                )
            except Exception as e:
                log.warning("Gemini request failed: %s", e)
                raise translate_error(e) from e
        return extract_text(response)
