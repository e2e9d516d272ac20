"""Word-processor host backed by a ``.docx`` file (python-docx)."""

from __future__ import annotations

import logging
from pathlib import Path

from docx import Document
from docx.document import Document as DocxDocument
from docx.text.paragraph import Paragraph

from gemini_office.core.types import HostKind, TextFormat
from gemini_office.exceptions import HostWriteError

from .markdown import Block, BlockKind, parse_blocks, parse_inline

log = logging.getLogger(__name__)

CODE_FONT = "Courier New"

_LIST_STYLES = {
    BlockKind.BULLET: "List Bullet",
    BlockKind.NUMBERED: "List Number",
}


class DocxHost:
    """Appends content at the end of a Word document body.

    Example:
        host = DocxHost.open("notes.docx")
        await host.insert_text("# Summary\\n- **done**", TextFormat.RICH)
        host.save()
    """

    def __init__(self, document: DocxDocument, path: Path | None = None) -> None:
        self.document = document
        self.path = path

    @classmethod
    def open(cls, path: str | Path) -> DocxHost:
        """Load an existing document, or start an empty one if it is missing."""
        path = Path(path)
        document = Document(str(path)) if path.exists() else Document()
        return cls(document, path)

    @property
    def kind(self) -> HostKind:
        return HostKind.TEXT_EDITOR

    async def insert_text(self, text: str, fmt: TextFormat) -> None:
        if fmt is TextFormat.RICH:
            self._insert_rich(text)
        else:
            for line in text.splitlines() or [""]:
                self.document.add_paragraph(line)

    async def read_context(self, max_chars: int) -> str:
        body = "\n".join(p.text for p in self.document.paragraphs if p.text)
        return body[:max_chars]

    def save(self, path: str | Path | None = None) -> Path:
        target = Path(path) if path is not None else self.path
        if target is None:
            raise HostWriteError("No path to save the document to")
        self.document.save(str(target))
        log.debug("Saved document to %s", target)
        return target

    def _insert_rich(self, text: str) -> None:
        blocks = parse_blocks(text)
        log.debug("Rendering %d Markdown block(s)", len(blocks))
        for block in blocks:
            self._add_block(block)

    def _add_block(self, block: Block) -> None:
        if block.kind is BlockKind.HEADING:
            paragraph = self.document.add_heading(level=min(block.level, 6))
        elif block.kind is BlockKind.CODE:
            paragraph = self.document.add_paragraph(style="No Spacing")
            run = paragraph.add_run(block.text)
            run.font.name = CODE_FONT
            return
        elif block.kind in _LIST_STYLES:
            paragraph = self.document.add_paragraph(style=_LIST_STYLES[block.kind])
        else:
            paragraph = self.document.add_paragraph()
        _add_runs(paragraph, block.text)


def _add_runs(paragraph: Paragraph, text: str) -> None:
    for inline in parse_inline(text):
        run = paragraph.add_run(inline.text)
        if inline.bold:
            run.bold = True
        if inline.italic:
            run.italic = True
        if inline.code:
            run.font.name = CODE_FONT
