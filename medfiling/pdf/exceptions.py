class PdfExtractionError(Exception):
    """Raised when a PDF cannot be parsed into text."""


class PdfValidationError(PdfExtractionError):
    """Raised when an upload is rejected before parsing (type or size)."""


class EmptyDocumentError(PdfExtractionError):
    """Raised when a PDF parses but yields no text."""
