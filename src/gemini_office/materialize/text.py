"""Line-level helpers shared by the response parsers."""

from collections.abc import Iterable

from gemini_office.constants import DEFAULT_PREAMBLE_TOKENS, ERROR_GLYPH

CODE_FENCE = "```"


def non_blank_lines(text: str) -> list[str]:
    """Split text into lines, dropping lines that are empty or whitespace."""
    return [line for line in text.splitlines() if line.strip()]


def is_preamble(line: str, tokens: Iterable[str] = DEFAULT_PREAMBLE_TOKENS) -> bool:
    """True if the line opens with a conversational preamble token.

    Matching is a case-insensitive prefix test after leading whitespace.
    """
    lowered = line.lstrip().lower()
    return any(token and lowered.startswith(token.lower()) for token in tokens)


def drop_preamble(
    lines: list[str], tokens: Iterable[str] = DEFAULT_PREAMBLE_TOKENS
) -> list[str]:
    """Drop at most one leading preamble line."""
    if lines and is_preamble(lines[0], tokens):
        return lines[1:]
    return lines


def drop_code_fences(lines: list[str]) -> list[str]:
    """Remove Markdown code fence lines such as ```csv or ```."""
    return [line for line in lines if not line.lstrip().startswith(CODE_FENCE)]


def is_error_response(text: str, prefix: str = ERROR_GLYPH) -> bool:
    """True if text is a rendered chat-layer error rather than content."""
    return text.lstrip().startswith(prefix)
