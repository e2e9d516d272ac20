"""End-to-end materialization into real document files.

Each test drives a session with a canned chat client, writes into a
file-backed host, saves, and inspects the reloaded document.
"""

from docx import Document
from openpyxl import Workbook, load_workbook
from pptx import Presentation
import pytest

from gemini_office import AssistantSession, HostKind, open_host
from tests.helpers import FakeChatClient

pytestmark = pytest.mark.integration


async def _ask_and_insert(path, reply, *, selection=None, prompt="go"):
    host = open_host(path, selection=selection)
    client = FakeChatClient(reply)
    session = AssistantSession(client, host.kind, host=host)
    answer = await session.send(prompt)
    outcome = await session.insert(answer)
    host.save()
    return outcome, client


@pytest.mark.asyncio
async def test_markdown_table_lands_in_workbook(tmp_path):
    path = tmp_path / "people.xlsx"
    reply = (
        "Here is the table you asked for:\n"
        "| Name | Age |\n|---|---|\n| Ann | 31 |\n| Bob | 4.5 |"
    )

    outcome, _ = await _ask_and_insert(path, reply, selection="C5:D9")

    assert outcome.succeeded and not outcome.fallback_used
    sheet = load_workbook(str(path)).active
    assert [[c.value for c in row] for row in sheet["C5:D7"]] == [
        ["Name", "Age"],
        ["Ann", 31],
        ["Bob", 4.5],
    ]
    assert sheet.column_dimensions["C"].width == len("Name") + 2


@pytest.mark.asyncio
async def test_selection_is_sent_as_context_and_charted(tmp_path):
    path = tmp_path / "sales.xlsx"
    workbook = Workbook()
    for row in [["Month", "Sales"], ["Jan", 10], ["Feb", 12]]:
        workbook.active.append(row)
    workbook.save(str(path))

    host = open_host(path, selection="A1:B3")
    client = FakeChatClient("Here is a pie chart of sales.")
    session = AssistantSession(client, HostKind.SPREADSHEET, host=host)

    outcome = await session.insert(await session.send("chart it"))

    assert outcome.succeeded
    assert client.requests[0].document_context == "Month,Sales\nJan,10\nFeb,12"
    # openpyxl drops charts when loading, so inspect the live sheet.
    (chart,) = host.sheet._charts
    assert chart.anchor == "D1"
    host.save()
    assert load_workbook(str(path)).active["A2"].value == "Jan"


@pytest.mark.asyncio
async def test_chart_without_range_fails_without_fallback(tmp_path):
    path = tmp_path / "empty.xlsx"

    outcome, _ = await _ask_and_insert(path, "bar chart", selection="A1")

    assert not outcome.succeeded
    assert not outcome.fallback_used
    assert load_workbook(str(path)).active["A1"].value is None


@pytest.mark.asyncio
async def test_rich_reply_lands_in_document(tmp_path):
    path = tmp_path / "notes.docx"
    Document().save(str(path))

    outcome, _ = await _ask_and_insert(
        path, "## Next steps\n1. Draft **plan**\n2. Review\n\nThanks!"
    )

    assert outcome.succeeded
    paragraphs = Document(str(path)).paragraphs
    assert [(p.style.name, p.text) for p in paragraphs] == [
        ("Heading 2", "Next steps"),
        ("List Number", "Draft plan"),
        ("List Number", "Review"),
        ("Normal", "Thanks!"),
    ]
    assert paragraphs[1].runs[1].bold


@pytest.mark.asyncio
async def test_structured_slides_land_in_deck(tmp_path):
    path = tmp_path / "deck.pptx"
    reply = (
        "Sure! Here are your slides:\n"
        '[{"title": "Why", "points": ["Speed", "Cost"]},'
        ' {"title": "How", "points": ["Pilot"]}]'
    )

    outcome, _ = await _ask_and_insert(path, reply)

    assert outcome.succeeded
    slides = Presentation(str(path)).slides
    assert [s.shapes.title.text for s in slides] == ["Why", "How"]
    assert slides[0].placeholders[1].text_frame.text == "Speed\nCost"


@pytest.mark.asyncio
async def test_error_reply_leaves_document_untouched(tmp_path):
    path = tmp_path / "deck.pptx"
    host = open_host(path)
    session = AssistantSession(
        FakeChatClient(error=ConnectionError("offline")), host.kind, host=host
    )

    reply = await session.send("slides please")
    outcome = await session.insert(reply)

    assert reply.is_error
    assert "No Internet connection" in reply.text
    assert outcome.skipped
    assert host.slide_count == 0
