class PipelineError(Exception):
    """Base exception for the client-side document pipeline.

    Carries the name of the file being processed and the stage
    ("upload" or "extract") at which it failed, where one applies.
    """

    def __init__(self, message: str, *, file_name: str = "", stage: str = "") -> None:
        super().__init__(message)
        self.file_name = file_name
        self.stage = stage


class ValidationError(PipelineError):
    """Raised for bad input before any network call is made."""


class UploadError(PipelineError):
    """Raised when the text extraction (upload) stage fails."""

    def __init__(self, message: str, *, file_name: str = "") -> None:
        super().__init__(message, file_name=file_name, stage="upload")


class ExtractError(PipelineError):
    """Raised when the field extraction stage fails."""

    def __init__(self, message: str, *, file_name: str = "") -> None:
        super().__init__(message, file_name=file_name, stage="extract")


class BusyError(PipelineError):
    """Raised when a batch is started while another one is running."""
