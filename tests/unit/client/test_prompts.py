import pytest

from gemini_office.client.models import Attachment, ChatRequest
from gemini_office.client.prompts import build_parts, system_instruction
from gemini_office.core.types import HostKind

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("host", "name"),
    [
        (HostKind.TEXT_EDITOR, "Word"),
        (HostKind.SPREADSHEET, "Excel"),
        (HostKind.PRESENTATION, "PowerPoint"),
        (HostKind.UNKNOWN, "Office"),
    ],
)
def test_system_instruction_names_the_host(host, name):
    instruction = system_instruction(host)

    assert instruction.startswith(f"You are a helpful assistant living inside Microsoft {name}.")
    assert "Markdown" in instruction


def test_host_specific_conventions():
    assert "CSV" in system_instruction(HostKind.SPREADSHEET)
    assert '"points"' in system_instruction(HostKind.PRESENTATION)
    assert "CSV" not in system_instruction(HostKind.TEXT_EDITOR)


def test_prompt_only():
    parts = build_parts(ChatRequest("Hi", HostKind.TEXT_EDITOR))

    assert [p.text for p in parts] == ["User Question: Hi"]


def test_context_then_attachment_then_question():
    attachment = Attachment("a.png", "image/png", b"\x89PNG")
    request = ChatRequest(
        "What is this?", HostKind.PRESENTATION, "slide text", attachment
    )

    context, blob, question = build_parts(request)

    assert context.text == "Document context:\nslide text"
    assert blob.inline_data.data == b"\x89PNG"
    assert blob.inline_data.mime_type == "image/png"
    assert question.text == "User Question: What is this?"


def test_attachment_from_path_guesses_mime_type(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.4")

    attachment = Attachment.from_path(path)

    assert attachment.name == "report.pdf"
    assert attachment.mime_type == "application/pdf"
    assert attachment.data == b"%PDF-1.4"
    assert repr(attachment) == (
        "Attachment(name='report.pdf', mime_type='application/pdf', size=8)"
    )


def test_attachment_unknown_extension_defaults_to_octet_stream(tmp_path):
    path = tmp_path / "blob.unknownext"
    path.write_bytes(b"x")

    assert Attachment.from_path(path).mime_type == "application/octet-stream"
