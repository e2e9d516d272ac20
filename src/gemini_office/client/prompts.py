"""System instructions and request parts for the chat model."""

from google.genai import types

from gemini_office.constants import HOST_DISPLAY_NAMES
from gemini_office.core.types import HostKind

from .models import ChatRequest

_BASE_INSTRUCTION = (
    "You are a helpful assistant living inside Microsoft {host}.\n"
    "Keep answers concise and relevant to document creation.\n"
    "If the user asks to generate text, table, or content, provide it clearly.\n"
    "Format usage: Markdown."
)

# Output conventions the materialization step understands, per host.
_HOST_CONVENTIONS: dict[HostKind, str] = {
    HostKind.SPREADSHEET: (
        "When asked for data, reply with CSV rows only (first row is the header). "
        "When asked for a formula, reply with the formula alone, starting with '='."
    ),
    HostKind.PRESENTATION: (
        "When asked for slides, reply with a JSON array of objects shaped "
        '[{"title": "...", "points": ["...", "..."]}].'
    ),
}


def system_instruction(host_kind: HostKind) -> str:
    """Instruction naming the host and the output shape it can take."""
    text = _BASE_INSTRUCTION.format(host=HOST_DISPLAY_NAMES[host_kind.value])
    convention = _HOST_CONVENTIONS.get(host_kind)
    return f"{text}\n{convention}" if convention else text


def build_parts(request: ChatRequest) -> list[types.Part]:
    """Context first, then the attachment, then the user's question."""
    parts: list[types.Part] = []
    if request.document_context:
        parts.append(
            types.Part.from_text(
                text=f"Document context:\n{request.document_context}"
            )
        )
    if request.attachment is not None:
        parts.append(
            types.Part.from_bytes(
                data=request.attachment.data,
                mime_type=request.attachment.mime_type,
            )
        )
    parts.append(types.Part.from_text(text=f"User Question: {request.prompt}"))
    return parts
