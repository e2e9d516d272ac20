"""Error normalization and chat-layer rendering for model requests"""  # noqa: D415

from google.genai import errors as genai_errors
import httpx

from gemini_office.constants import ERROR_GLYPH, ERROR_HINT

from ..exceptions import APIError, GeminiOfficeError, NetworkError


def translate_error(error: Exception) -> GeminiOfficeError:
    """Map SDK and transport failures onto the package's exception types.

    Errors that are already `GeminiOfficeError`s pass through unchanged.
    """
    if isinstance(error, GeminiOfficeError):
        return error
    if isinstance(error, genai_errors.APIError):
        detail = error.message or error.status or str(error)
        translated: GeminiOfficeError = APIError(f"API Error ({error.code}): {detail}")
    elif isinstance(error, httpx.TimeoutException | TimeoutError):
        translated = NetworkError(f"Request timed out: {error}")
    elif isinstance(error, httpx.TransportError | OSError):
        translated = NetworkError(f"No Internet connection: {error}")
    else:
        translated = APIError(f"Content generation failed: {error}")
    return translated


def render_error(error: BaseException, prefix: str = ERROR_GLYPH) -> str:
    """Render an error the way the chat transcript shows it.

    The rendered text starts with the error prefix, so it is never written
    into a document.
    """
    return f"{prefix} **Error**: {error}\n\n{ERROR_HINT}"
