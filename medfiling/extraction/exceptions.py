class ExtractionError(Exception):
    """Raised when field extraction fails."""


class ExtractionValidationError(ExtractionError):
    """Raised when the model's record cannot be turned into filing fields."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
