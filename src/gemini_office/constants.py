"""Constants shared across the Gemini office assistant"""  # noqa: D415

# Model defaults
DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_TIMEOUT_SECONDS = 60.0

# Document context sent along with each request
DEFAULT_MAX_CONTEXT_CHARS = 4000

# Chat-layer error rendering. Any reply starting with the glyph is never
# written into a document.
ERROR_GLYPH = "❌"
ERROR_HINT = "Please check your internet connection or API Key."

# Canned replies from the chat layer when the model returns nothing usable
EMPTY_RESPONSE_TEXT = "I received an empty response from Gemini."
NO_TEXT_RESPONSE_TEXT = "No response generated."
MISSING_KEY_MESSAGE = "API Key is missing. Please check settings."

# Materialization heuristics
DEFAULT_PREAMBLE_TOKENS = ("sure", "here")
DEFAULT_CHART_KEYWORDS = ("chart", "grafik")
DEFAULT_LINE_KEYWORDS = ("line", "garis")
DEFAULT_BAR_KEYWORDS = ("bar", "batang")
DEFAULT_CHART_TITLE = "Generated Chart"
DEFAULT_SLIDE_TITLE = "No Title"

# Spreadsheet column autofit
MIN_COLUMN_PADDING = 2
MAX_COLUMN_WIDTH = 150

# Host display names used in the system instruction
HOST_DISPLAY_NAMES = {
    "text_editor": "Word",
    "spreadsheet": "Excel",
    "presentation": "PowerPoint",
    "unknown": "Office",
}
