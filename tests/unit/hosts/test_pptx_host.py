from pptx import Presentation
import pytest

from gemini_office.core.types import HostKind, TextFormat
from gemini_office.exceptions import HostWriteError
from gemini_office.hosts import PptxHost

pytestmark = pytest.mark.unit


@pytest.fixture
def host():
    return PptxHost(Presentation())


@pytest.mark.asyncio
async def test_append_slide_fills_title_and_body(host):
    await host.append_slide("Intro", "A\nB")
    await host.append_slide("Next", "")

    assert host.slide_count == 2
    first = host.presentation.slides[0]
    assert first.shapes.title.text == "Intro"
    body = first.placeholders[1].text_frame
    assert [p.text for p in body.paragraphs] == ["A", "B"]


@pytest.mark.asyncio
async def test_insert_text_on_empty_deck_adds_blank_slide(host):
    await host.insert_text("loose text", TextFormat.PLAIN)

    assert host.slide_count == 1
    assert await host.read_context(100) == "loose text"


@pytest.mark.asyncio
async def test_insert_text_lands_on_last_slide(host):
    await host.append_slide("One", "")
    await host.append_slide("Two", "b")

    await host.insert_text("extra", TextFormat.PLAIN)

    assert host.slide_count == 2
    assert await host.read_context(100) == "Two\nb\nextra"


@pytest.mark.asyncio
async def test_read_context_empty_deck(host):
    assert await host.read_context(100) == ""


@pytest.mark.asyncio
async def test_template_without_content_layout_is_rejected(host):
    layouts = host.presentation.slide_layouts
    for layout in list(layouts)[1:]:
        layouts.remove(layout)

    with pytest.raises(HostWriteError):
        await host.append_slide("T", "b")
    assert host.slide_count == 0


@pytest.mark.asyncio
async def test_open_save_round_trip(tmp_path):
    path = tmp_path / "deck.pptx"
    host = PptxHost.open(path)
    await host.append_slide("Saved", "point")

    host.save()

    assert host.kind is HostKind.PRESENTATION
    reloaded = Presentation(str(path))
    assert reloaded.slides[0].shapes.title.text == "Saved"


def test_save_without_path_raises(host):
    with pytest.raises(HostWriteError):
        host.save()
