"""Presentation host backed by a ``.pptx`` deck (python-pptx)."""

from __future__ import annotations

import logging
from pathlib import Path

from pptx import Presentation
from pptx.presentation import Presentation as PptxPresentation
from pptx.slide import Slide
from pptx.util import Inches

from gemini_office.core.types import HostKind, TextFormat
from gemini_office.exceptions import HostWriteError

log = logging.getLogger(__name__)

# Layout indices of the default template.
TITLE_AND_CONTENT_LAYOUT = 1
BLANK_LAYOUT = 6
BODY_PLACEHOLDER_IDX = 1

_MARGIN = Inches(0.5)
_TEXTBOX_TOP = Inches(1.5)
_TEXTBOX_HEIGHT = Inches(4)


class PptxHost:
    """Appends slides to the end of a deck."""

    def __init__(
        self, presentation: PptxPresentation, path: Path | None = None
    ) -> None:
        self.presentation = presentation
        self.path = path

    @classmethod
    def open(cls, path: str | Path) -> PptxHost:
        """Load an existing deck, or start an empty one if it is missing."""
        path = Path(path)
        presentation = Presentation(str(path)) if path.exists() else Presentation()
        return cls(presentation, path)

    @property
    def kind(self) -> HostKind:
        return HostKind.PRESENTATION

    @property
    def slide_count(self) -> int:
        return len(self.presentation.slides)

    async def append_slide(self, title: str, body: str) -> None:
        layouts = self.presentation.slide_layouts
        if len(layouts) <= TITLE_AND_CONTENT_LAYOUT:
            raise HostWriteError("Template has no 'Title and Content' layout")
        slide = self.presentation.slides.add_slide(layouts[TITLE_AND_CONTENT_LAYOUT])
        if slide.shapes.title is None:
            raise HostWriteError("Slide layout has no title placeholder")
        slide.shapes.title.text = title

        body_shape = next(
            (
                ph
                for ph in slide.placeholders
                if ph.placeholder_format.idx == BODY_PLACEHOLDER_IDX
            ),
            None,
        )
        if body_shape is None:
            raise HostWriteError("Slide layout has no body placeholder")
        body_shape.text_frame.text = body

    async def insert_text(self, text: str, fmt: TextFormat) -> None:
        slide = self._last_or_blank_slide()
        width = self.presentation.slide_width - 2 * _MARGIN
        box = slide.shapes.add_textbox(_MARGIN, _TEXTBOX_TOP, width, _TEXTBOX_HEIGHT)
        box.text_frame.word_wrap = True
        box.text_frame.text = text

    async def read_context(self, max_chars: int) -> str:
        if not self.slide_count:
            return ""
        slide = self.presentation.slides[self.slide_count - 1]
        texts = [
            shape.text_frame.text
            for shape in slide.shapes
            if shape.has_text_frame and shape.text_frame.text
        ]
        return "\n".join(texts)[:max_chars]

    def save(self, path: str | Path | None = None) -> Path:
        target = Path(path) if path is not None else self.path
        if target is None:
            raise HostWriteError("No path to save the presentation to")
        self.presentation.save(str(target))
        log.debug("Saved presentation to %s", target)
        return target

    def _last_or_blank_slide(self) -> Slide:
        if self.slide_count:
            return self.presentation.slides[self.slide_count - 1]
        log.debug("Deck is empty; adding a blank slide for text")
        return self.presentation.slides.add_slide(
            self.presentation.slide_layouts[BLANK_LAYOUT]
        )
