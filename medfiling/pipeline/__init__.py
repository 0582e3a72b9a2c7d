from medfiling.pipeline.batch_processor import BatchProcessor
from medfiling.pipeline.exceptions import (
    BusyError,
    ExtractError,
    PipelineError,
    UploadError,
    ValidationError,
)
from medfiling.pipeline.models import (
    BatchResult,
    BatchState,
    PipelineFailure,
    ProcessedDocument,
    ProgressEvent,
    SelectedFile,
    Stage,
)
from medfiling.pipeline.review_session import ReviewSession
from medfiling.pipeline.upload_client import UploadClient

__all__ = [
    "BatchProcessor",
    "BatchResult",
    "BatchState",
    "BusyError",
    "ExtractError",
    "PipelineError",
    "PipelineFailure",
    "ProcessedDocument",
    "ProgressEvent",
    "ReviewSession",
    "SelectedFile",
    "Stage",
    "UploadClient",
    "UploadError",
    "ValidationError",
]
