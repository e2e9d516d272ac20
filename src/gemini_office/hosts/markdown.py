"""Minimal Markdown reader used for rich-text insertion into documents.

Only what model replies typically contain is understood: ATX headings,
bullet and numbered list items, fenced code blocks, and inline ``**bold**``,
``*italic*`` and ``` `code` ``` spans. Everything else is a paragraph.
"""

from __future__ import annotations

import dataclasses
import enum
import re

_CODE_FENCE = "```"
_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
_BULLET_RE = re.compile(r"^\s*[-*+•]\s+(.+)$")
_NUMBERED_RE = re.compile(r"^\s*\d+[.)]\s+(.+)$")
_RULE_RE = re.compile(r"^\s*([-*_])(\s*\1){2,}\s*$")

# Alternation order sets priority: code > bold > italic.
_INLINE_RE = re.compile(
    r"`(?P<code>[^`]+)`"
    r"|\*\*(?P<bold>.+?)\*\*|__(?P<bold_u>.+?)__"
    r"|(?<![*\w])\*(?!\*)(?P<italic>[^*]+?)\*(?!\*)"
    r"|(?<![_\w])_(?!_)(?P<italic_u>[^_]+?)_(?![_\w])"
)


class BlockKind(enum.Enum):
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BULLET = "bullet"
    NUMBERED = "numbered"
    CODE = "code"


@dataclasses.dataclass(frozen=True, slots=True)
class InlineRun:
    text: str
    bold: bool = False
    italic: bool = False
    code: bool = False


@dataclasses.dataclass(frozen=True, slots=True)
class Block:
    kind: BlockKind
    text: str
    level: int = 0


def parse_inline(text: str) -> list[InlineRun]:
    """Split a line into runs of plain, bold, italic and code text."""
    runs: list[InlineRun] = []
    cursor = 0
    for match in _INLINE_RE.finditer(text):
        if match.start() > cursor:
            runs.append(InlineRun(text[cursor : match.start()]))
        groups = match.groupdict()
        if groups["code"] is not None:
            runs.append(InlineRun(groups["code"], code=True))
        elif groups["bold"] is not None or groups["bold_u"] is not None:
            runs.append(InlineRun(groups["bold"] or groups["bold_u"], bold=True))
        else:
            runs.append(InlineRun(groups["italic"] or groups["italic_u"], italic=True))
        cursor = match.end()
    if cursor < len(text):
        runs.append(InlineRun(text[cursor:]))
    return runs or [InlineRun(text)]


def parse_blocks(text: str) -> list[Block]:
    """Group Markdown lines into blocks; blank lines and rules are dropped."""
    blocks: list[Block] = []
    code_lines: list[str] | None = None

    for line in text.splitlines():
        if line.strip().startswith(_CODE_FENCE):
            if code_lines is None:
                code_lines = []
            else:
                blocks.append(Block(BlockKind.CODE, "\n".join(code_lines)))
                code_lines = None
            continue
        if code_lines is not None:
            code_lines.append(line)
            continue
        if not line.strip() or _RULE_RE.match(line):
            continue

        if heading := _HEADING_RE.match(line):
            blocks.append(
                Block(BlockKind.HEADING, heading.group(2).strip(), len(heading.group(1)))
            )
        elif bullet := _BULLET_RE.match(line):
            blocks.append(Block(BlockKind.BULLET, bullet.group(1).strip()))
        elif numbered := _NUMBERED_RE.match(line):
            blocks.append(Block(BlockKind.NUMBERED, numbered.group(1).strip()))
        else:
            blocks.append(Block(BlockKind.PARAGRAPH, line.strip()))

    # An unterminated fence still yields its code.
    if code_lines:
        blocks.append(Block(BlockKind.CODE, "\n".join(code_lines)))
    return blocks
