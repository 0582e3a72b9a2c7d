import httpx

from medfiling.config.settings import Settings
from medfiling.pipeline.batch_processor import BatchProcessor, ProgressListener
from medfiling.pipeline.review_session import ReviewSession
from medfiling.pipeline.upload_client import UploadClient
from medfiling.submission.sinks import HttpSubmissionSink


def build_http_client(settings: Settings) -> httpx.Client:
    return httpx.Client(base_url=settings.api_base_url)


def build_batch_processor(
    settings: Settings,
    http: httpx.Client,
    on_progress: ProgressListener | None = None,
) -> BatchProcessor:
    """Build a BatchProcessor talking to the API at settings.api_base_url."""
    upload_client = UploadClient(
        http,
        max_upload_bytes=settings.max_upload_bytes,
        upload_timeout_seconds=settings.upload_timeout_seconds,
        extract_timeout_seconds=settings.extract_timeout_seconds,
    )
    return BatchProcessor(upload_client, on_progress=on_progress)


def build_review_session(settings: Settings, http: httpx.Client) -> ReviewSession:
    sink = HttpSubmissionSink(http, timeout_seconds=settings.submit_timeout_seconds)
    return ReviewSession(sink)
