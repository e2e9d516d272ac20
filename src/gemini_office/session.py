"""Chat session controller: one in-flight request at a time.

The session owns the attachment selected for the next request. When a
request starts, the attachment moves into that request's `RequestContext`,
and the context clears it when the request completes, whatever the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from gemini_office.client.error_handler import render_error, translate_error
from gemini_office.client.models import Attachment, ChatClient, ChatRequest
from gemini_office.config.types import FrozenConfig
from gemini_office.core.types import (
    ChatReply,
    Failure,
    HostKind,
    Result,
    Success,
    WriteOutcome,
)
from gemini_office.exceptions import GeminiOfficeError, RequestInProgressError
from gemini_office.hosts.base import ContextReader, TextHost
from gemini_office.materialize.pipeline import MaterializationPipeline

log = logging.getLogger(__name__)


@dataclass(slots=True)
class RequestContext:
    """State owned by exactly one in-flight request."""

    prompt: str
    attachment: Attachment | None = None
    completed: bool = False

    def complete(self) -> None:
        self.attachment = None
        self.completed = True


class AssistantSession:
    """Send prompts to a chat client and insert replies into a host.

    Example:
        session = AssistantSession(client, HostKind.SPREADSHEET, host=xlsx_host)
        reply = await session.send("Sales by region as a table")
        if reply and not reply.is_error:
            await session.insert(reply)
    """

    def __init__(
        self,
        client: ChatClient,
        host_kind: HostKind,
        *,
        host: TextHost | None = None,
        pipeline: MaterializationPipeline | None = None,
        context_reader: ContextReader | None = None,
        config: FrozenConfig | None = None,
    ) -> None:
        self.client = client
        self.host_kind = host_kind
        self.host = host
        self.config = config or FrozenConfig()
        self.pipeline = pipeline or MaterializationPipeline(self.config)
        if context_reader is None and isinstance(host, ContextReader):
            context_reader = host
        self.context_reader = context_reader
        self._pending_attachment: Attachment | None = None
        self._in_flight: RequestContext | None = None

    @property
    def busy(self) -> bool:
        return self._in_flight is not None

    @property
    def pending_attachment(self) -> Attachment | None:
        return self._pending_attachment

    def attach(self, attachment: Attachment | None) -> None:
        """Select the file sent with the next request (None clears it)."""
        self._pending_attachment = attachment

    async def send(self, prompt: str) -> ChatReply | None:
        """Send a prompt and return the rendered reply.

        Returns None for blank prompts. Failures are returned as error
        replies rather than raised.

        Raises:
            RequestInProgressError: If another request has not finished yet.
        """
        prompt = prompt.strip()
        if not prompt:
            return None
        if self._in_flight is not None:
            raise RequestInProgressError("A request is already in progress")

        context = RequestContext(prompt, self._pending_attachment)
        self._pending_attachment = None
        self._in_flight = context
        try:
            result = await self._request(context)
        finally:
            context.complete()
            self._in_flight = None

        if isinstance(result, Success):
            return ChatReply(result.value)
        return ChatReply(render_error(result.error, self.config.error_prefix), is_error=True)

    async def insert(self, reply: ChatReply | str) -> WriteOutcome:
        """Materialize a reply into the session's host."""
        if isinstance(reply, ChatReply):
            if reply.is_error:
                return WriteOutcome.skip("error reply")
            reply = reply.text
        if self.host is None:
            return WriteOutcome.failed("No host document is attached to this session")
        return await self.pipeline.materialize(reply, self.host_kind, self.host)

    async def _request(self, context: RequestContext) -> Result[str, GeminiOfficeError]:
        try:
            document_context = await self._read_context()
            text = await self.client.generate(
                ChatRequest(
                    prompt=context.prompt,
                    host_kind=self.host_kind,
                    document_context=document_context,
                    attachment=context.attachment,
                )
            )
        except Exception as e:
            log.warning("Chat request failed: %s", e)
            return Failure(translate_error(e))
        return Success(text)

    async def _read_context(self) -> str:
        if self.context_reader is None or self.config.max_context_chars == 0:
            return ""
        try:
            text = await self.context_reader.read_context(self.config.max_context_chars)
        except Exception as e:
            log.warning("Could not read document context; sending without it: %s", e)
            return ""
        return text[: self.config.max_context_chars]
