"""Recording fakes for host adapters and chat clients."""

import asyncio
from typing import Any

from gemini_office.client.models import ChatRequest
from gemini_office.core.types import ChartKind, DataGrid, TextFormat
from gemini_office.exceptions import HostWriteError


class RecordingHost:
    """Records every host call as ``(method, args)``.

    Methods named in ``fail_on`` raise `HostWriteError` after being recorded.
    """

    def __init__(self, *, fail_on: tuple[str, ...] = ()) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.fail_on = set(fail_on)

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))
        if method in self.fail_on:
            raise HostWriteError(f"{method} rejected")

    def calls_to(self, method: str) -> list[tuple[Any, ...]]:
        return [args for name, args in self.calls if name == method]

    @property
    def methods(self) -> list[str]:
        return [name for name, _ in self.calls]


class FakeTextHost(RecordingHost):
    """Text host; ``fail_formats`` makes insertion in those formats fail."""

    def __init__(
        self,
        *,
        fail_on: tuple[str, ...] = (),
        fail_formats: frozenset[TextFormat] = frozenset(),
        context: str = "",
    ) -> None:
        super().__init__(fail_on=fail_on)
        self.fail_formats = fail_formats
        self.context = context

    async def insert_text(self, text: str, fmt: TextFormat) -> None:
        self._record("insert_text", text, fmt)
        if fmt in self.fail_formats:
            raise HostWriteError(f"{fmt.value} insertion rejected")

    async def read_context(self, max_chars: int) -> str:
        return self.context[:max_chars]


class FakeSpreadsheetHost(FakeTextHost):
    def __init__(
        self,
        *,
        selection: str = "B2",
        active_cell: str | None = None,
        fail_on: tuple[str, ...] = (),
        fail_formats: frozenset[TextFormat] = frozenset(),
    ) -> None:
        super().__init__(fail_on=fail_on, fail_formats=fail_formats)
        self._selection = selection
        self._active_cell = active_cell

    @property
    def selection(self) -> str:
        return self._selection

    @property
    def active_cell(self) -> str:
        return self._active_cell or self._selection.split(":")[0]

    async def insert_formula(self, formula: str, target_cell: str) -> None:
        self._record("insert_formula", formula, target_cell)

    async def insert_grid(self, grid: DataGrid, target_range: str) -> None:
        self._record("insert_grid", grid, target_range)

    async def autofit_columns(self, target_range: str) -> None:
        self._record("autofit_columns", target_range)

    async def insert_chart(self, kind: ChartKind, data_range: str, title: str) -> None:
        self._record("insert_chart", kind, data_range, title)


class FakePresentationHost(FakeTextHost):
    """Presentation host; ``fail_at`` makes the n-th appended slide (1-based) fail."""

    def __init__(
        self,
        *,
        fail_at: int | None = None,
        fail_on: tuple[str, ...] = (),
        fail_formats: frozenset[TextFormat] = frozenset(),
    ) -> None:
        super().__init__(fail_on=fail_on, fail_formats=fail_formats)
        self.fail_at = fail_at
        self.slides: list[tuple[str, str]] = []

    async def append_slide(self, title: str, body: str) -> None:
        self._record("append_slide", title, body)
        if self.fail_at is not None and len(self.calls_to("append_slide")) == self.fail_at:
            raise HostWriteError("slide layout missing")
        self.slides.append((title, body))


class FakeChatClient:
    """Chat client returning canned replies (or raising canned errors).

    If ``gate`` is given, `generate` waits on it before answering, which keeps
    a request in flight for as long as a test needs.
    """

    def __init__(
        self,
        reply: str = "ok",
        *,
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.reply = reply
        self.error = error
        self.gate = gate
        self.requests: list[ChatRequest] = []

    async def generate(self, request: ChatRequest) -> str:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.reply
