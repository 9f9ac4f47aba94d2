"""
Custom Exceptions Module.

This module defines all custom exceptions used throughout the scramble
scorecard system. Poor OCR input is never an exception: the interpreter
reports it through its confidence value. These exceptions cover the
cases where a caller cannot continue.

Exception Hierarchy:
    ScrambleError (base)
    ├── ConfigurationError
    ├── InputError
    │   ├── FileNotFoundError
    │   └── PayloadError
    ├── OCRError
    │   └── OCRProcessingError
    ├── ExtractionError
    │   └── NoPlayersDetectedError
    ├── ScoringError
    │   ├── UnknownFormatError
    │   └── EmptyRosterError
    └── OutputError
        └── ExcelExportError
"""


class ScrambleError(Exception):
    """
    Base exception for all scramble scorecard errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(ScrambleError):
    """Raised when the configuration file cannot be used."""
    pass


# =============================================================================
# INPUT ERRORS
# =============================================================================

class InputError(ScrambleError):
    """Base exception for input handling errors."""
    pass


class FileNotFoundError(InputError):
    """Raised when an input payload file cannot be found."""

    def __init__(self, filepath: str):
        message = f"File not found: {filepath}"
        details = {"filepath": filepath}
        super().__init__(message, details)


class PayloadError(InputError):
    """
    Raised when an OCR payload is not in the expected shape.

    Example:
        >>> raise PayloadError("annotations must be a list", source="card1.json")
    """

    def __init__(self, reason: str, source: str = None):
        message = f"Invalid OCR payload: {reason}"
        details = {"source": source} if source else None
        super().__init__(message, details)


# =============================================================================
# OCR ERRORS
# =============================================================================

class OCRError(ScrambleError):
    """Base exception for errors from the external OCR provider."""
    pass


class OCRProcessingError(OCRError):
    """Raised when the OCR provider response reports a failure."""

    USER_MESSAGE = "Processing failed, please retry with a clearer image"

    def __init__(self, source: str, reason: str = None):
        message = f"OCR processing failed for: {source}"
        details = {"source": source, "reason": reason}
        super().__init__(message, details)


# =============================================================================
# EXTRACTION ERRORS
# =============================================================================

class ExtractionError(ScrambleError):
    """Base exception for scorecard extraction errors."""
    pass


class NoPlayersDetectedError(ExtractionError):
    """
    Raised by the orchestrating processor when a scorecard yields no players.

    The interpreter itself returns an empty, low-confidence result; this
    exception is how the caller escalates to manual entry.
    """

    def __init__(self, source: str = None, confidence: float = None):
        message = (
            "No players detected in scorecard. "
            "Please ensure scorecard is legible."
        )
        details = {"source": source, "confidence": confidence}
        super().__init__(message, details)


# =============================================================================
# SCORING ERRORS
# =============================================================================

class ScoringError(ScrambleError):
    """Base exception for scoring and ranking errors."""
    pass


class UnknownFormatError(ScoringError):
    """Raised when a format tag is neither straight nor champagne."""

    def __init__(self, scramble_format: str, supported: list):
        message = f"Unknown scramble format: '{scramble_format}'"
        details = {"format": scramble_format, "supported": supported}
        super().__init__(message, details)


class EmptyRosterError(ScoringError):
    """Raised when a team with no players is scored."""

    def __init__(self, team_name: str = None):
        message = "Cannot score a team with no players"
        details = {"team": team_name} if team_name else None
        super().__init__(message, details)


# =============================================================================
# OUTPUT ERRORS
# =============================================================================

class OutputError(ScrambleError):
    """Base exception for output handling errors."""
    pass


class ExcelExportError(OutputError):
    """Raised when Excel export fails."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Failed to export Excel file: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


__all__ = [
    'ScrambleError',
    'ConfigurationError',
    'InputError',
    'FileNotFoundError',
    'PayloadError',
    'OCRError',
    'OCRProcessingError',
    'ExtractionError',
    'NoPlayersDetectedError',
    'ScoringError',
    'UnknownFormatError',
    'EmptyRosterError',
    'OutputError',
    'ExcelExportError',
]
