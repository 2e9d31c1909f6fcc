"""Exception types raised across the E-Power package."""


class EPowerError(Exception):
    """Base class for all E-Power errors."""


class ConfigurationError(EPowerError):
    """Raised when required settings (such as the API key) are missing."""


class FileReadError(EPowerError):
    """Raised when an uploaded file cannot be read."""


class UnsupportedFileError(EPowerError):
    """Raised when an uploaded file is neither a CSV nor an image."""


class ResponseFormatError(EPowerError):
    """Raised when the model reply does not match the expected shape."""


class AnalysisError(EPowerError):
    """User-facing failure of an energy analysis request."""
