from __future__ import annotations

from dataclasses import dataclass
import mimetypes
from pathlib import Path
from typing import Protocol

from gemini_office.core.types import HostKind

DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class Attachment:
    """A file sent along with one request."""

    name: str
    mime_type: str
    data: bytes

    @classmethod
    def from_path(cls, path: str | Path) -> Attachment:
        path = Path(path)
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(path.name, mime_type or DEFAULT_MIME_TYPE, path.read_bytes())

    def __repr__(self) -> str:
        return (
            f"Attachment(name={self.name!r}, mime_type={self.mime_type!r}, "
            f"size={len(self.data)})"
        )


@dataclass(frozen=True)
class ChatRequest:
    prompt: str
    host_kind: HostKind
    document_context: str = ""
    attachment: Attachment | None = None


class ChatClient(Protocol):
    async def generate(self, request: ChatRequest) -> str: ...
