"""Chat client: request models, Gemini transport and error rendering."""

from .error_handler import render_error, translate_error
from .gemini import GeminiChatClient, extract_text
from .models import Attachment, ChatClient, ChatRequest
from .prompts import build_parts, system_instruction

__all__ = [
    "Attachment",
    "ChatClient",
    "ChatRequest",
    "GeminiChatClient",
    "build_parts",
    "extract_text",
    "render_error",
    "system_instruction",
    "translate_error",
]
