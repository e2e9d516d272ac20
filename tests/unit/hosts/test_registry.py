import pytest

from gemini_office.core.types import HostKind
from gemini_office.exceptions import GeminiOfficeError, UnsupportedDocumentError
from gemini_office.hosts import DocxHost, PptxHost, XlsxHost, host_kind_for, open_host

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("name", "kind"),
    [
        ("a.docx", HostKind.TEXT_EDITOR),
        ("A.XLSX", HostKind.SPREADSHEET),
        ("deck.pptx", HostKind.PRESENTATION),
        ("notes.txt", HostKind.UNKNOWN),
        ("noext", HostKind.UNKNOWN),
    ],
)
def test_host_kind_for(name, kind):
    assert host_kind_for(name) is kind


@pytest.mark.parametrize(
    ("name", "host_type"),
    [("a.docx", DocxHost), ("b.xlsx", XlsxHost), ("c.pptx", PptxHost)],
)
def test_open_host_missing_files_start_empty(tmp_path, name, host_type):
    host = open_host(tmp_path / name)

    assert isinstance(host, host_type)
    assert host.path == tmp_path / name


def test_open_host_passes_selection_to_spreadsheets(tmp_path):
    host = open_host(tmp_path / "b.xlsx", selection="C3:D4")

    assert host.selection == "C3:D4"


@pytest.mark.parametrize("name", ["notes.txt", "README"])
def test_unsupported_documents(tmp_path, name):
    with pytest.raises(UnsupportedDocumentError) as exc_info:
        open_host(tmp_path / name)

    assert isinstance(exc_info.value, GeminiOfficeError)
    assert ".docx" in str(exc_info.value)
