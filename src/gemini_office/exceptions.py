"""Basic exceptions for the Gemini office assistant"""  # noqa: D415


class GeminiOfficeError(Exception):
    """Base exception for Gemini office assistant errors"""  # noqa: D415


class ConfigurationError(GeminiOfficeError):
    """Raised when configuration cannot be resolved or is invalid"""  # noqa: D415


class MissingKeyError(GeminiOfficeError):
    """Raised when required API key or configuration key is missing"""  # noqa: D415


class APIError(GeminiOfficeError):
    """Raised when the generative model endpoint rejects a request"""  # noqa: D415


class NetworkError(GeminiOfficeError):
    """Raised when network issues occur"""  # noqa: D415


class HostWriteError(GeminiOfficeError):
    """Raised by host adapters when a document mutation is rejected"""  # noqa: D415


class UnsupportedDocumentError(GeminiOfficeError):
    """Raised when a document type has no host adapter"""  # noqa: D415


class RequestInProgressError(GeminiOfficeError):
    """Raised when a request is sent while another one is still in flight"""  # noqa: D415
