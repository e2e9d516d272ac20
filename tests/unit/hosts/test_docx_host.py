from docx import Document
import pytest

from gemini_office.core.types import HostKind, TextFormat
from gemini_office.exceptions import HostWriteError
from gemini_office.hosts import DocxHost

pytestmark = pytest.mark.unit


@pytest.fixture
def host():
    return DocxHost(Document())


def _styles(host):
    return [(p.style.name, p.text) for p in host.document.paragraphs]


@pytest.mark.asyncio
async def test_rich_markdown_maps_to_word_styles(host):
    await host.insert_text(
        "# Summary\nIntro **bold** and *soft*\n- first\n1. one\n```\ncode()\n```",
        TextFormat.RICH,
    )

    assert _styles(host) == [
        ("Heading 1", "Summary"),
        ("Normal", "Intro bold and soft"),
        ("List Bullet", "first"),
        ("List Number", "one"),
        ("No Spacing", "code()"),
    ]
    intro_runs = host.document.paragraphs[1].runs
    assert [(r.text, r.bold, r.italic) for r in intro_runs] == [
        ("Intro ", None, None),
        ("bold", True, None),
        (" and ", None, None),
        ("soft", None, True),
    ]
    assert host.document.paragraphs[4].runs[0].font.name == "Courier New"


@pytest.mark.asyncio
async def test_deep_headings_are_supported(host):
    await host.insert_text("###### Six", TextFormat.RICH)

    assert _styles(host) == [("Heading 6", "Six")]


@pytest.mark.asyncio
async def test_plain_text_keeps_markup_verbatim(host):
    await host.insert_text("# not styled\n**x**", TextFormat.PLAIN)

    assert _styles(host) == [("Normal", "# not styled"), ("Normal", "**x**")]


@pytest.mark.asyncio
async def test_read_context_is_bounded(host):
    host.document.add_paragraph("alpha")
    host.document.add_paragraph("")
    host.document.add_paragraph("beta")

    assert await host.read_context(100) == "alpha\nbeta"
    assert await host.read_context(3) == "alp"


def test_open_missing_file_starts_empty_and_saves(tmp_path):
    path = tmp_path / "new.docx"

    host = DocxHost.open(path)
    host.document.add_paragraph("hello")
    saved = host.save()

    assert host.kind is HostKind.TEXT_EDITOR
    assert saved == path
    assert [p.text for p in Document(str(path)).paragraphs] == ["hello"]


def test_save_without_path_raises(host):
    with pytest.raises(HostWriteError):
        host.save()
