from collections.abc import Callable, Sequence

from medfiling.logging.logger import Log
from medfiling.pipeline.exceptions import BusyError, PipelineError, ValidationError
from medfiling.pipeline.models import (
    BatchResult,
    BatchState,
    PipelineFailure,
    PipelineOutcome,
    ProcessedDocument,
    ProgressEvent,
    SelectedFile,
    Stage,
)
from medfiling.pipeline.upload_client import UploadClient

ProgressListener = Callable[[ProgressEvent], None]


class BatchProcessor:
    """Processes a list of selected files one at a time, in order.

    States: IDLE -> RUNNING -> COMPLETED | FAILED. The first failing file
    aborts the batch; documents already processed in that run are dropped.
    Progress is reported through a single status line that each step
    overwrites, and the last error is kept alongside it.
    """

    def __init__(
        self,
        upload_client: UploadClient,
        on_progress: ProgressListener | None = None,
    ) -> None:
        self._upload_client = upload_client
        self._on_progress = on_progress
        self._state = BatchState.IDLE
        self._status = ""
        self._error: str | None = None
        self._failure: PipelineFailure | None = None
        self._result: BatchResult | None = None

    @property
    def state(self) -> BatchState:
        return self._state

    @property
    def status(self) -> str:
        return self._status

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def failure(self) -> PipelineFailure | None:
        return self._failure

    @property
    def result(self) -> BatchResult | None:
        return self._result

    def run(self, files: Sequence[SelectedFile]) -> BatchResult:
        """Process every file and return the documents in input order.

        Raises:
            BusyError: a batch is already running.
            ValidationError: no files were given, or a file failed validation.
            UploadError: a file failed at the upload stage.
            ExtractError: a file failed at the extract stage.
        """
        if self._state is BatchState.RUNNING:
            raise BusyError("A batch is already being processed")
        if not files:
            raise ValidationError("Please select file(s) first")

        self._state = BatchState.RUNNING
        self._result = None
        self._error = None
        self._failure = None
        self._status = f"Processing {len(files)} file(s)..."
        Log.info(f"Batch started with {len(files)} file(s)")

        documents: list[ProcessedDocument] = []
        for index, file in enumerate(files):
            outcome = self._process_one(file, index, len(files))
            if isinstance(outcome, PipelineFailure):
                self._fail(outcome)
                raise outcome.error or PipelineError(
                    outcome.message, file_name=outcome.file_name, stage=outcome.stage
                )
            documents.append(outcome)

        self._result = BatchResult.of(documents)
        self._state = BatchState.COMPLETED
        self._status = f"Processed {len(documents)} file(s) successfully!"
        Log.info(self._status)
        return self._result

    def reset(self) -> None:
        """Forget the last batch and return to IDLE."""
        if self._state is BatchState.RUNNING:
            raise BusyError("Cannot reset while a batch is being processed")
        self._state = BatchState.IDLE
        self._status = ""
        self._error = None
        self._failure = None
        self._result = None

    def _process_one(self, file: SelectedFile, index: int, total: int) -> PipelineOutcome:
        try:
            self._report(file, Stage.UPLOADING, index, total)
            return self._upload_client.process(
                file,
                on_stage=lambda stage: self._report(file, stage, index, total),
            )
        except PipelineError as exc:
            return PipelineFailure(
                file_name=exc.file_name or file.name,
                stage=exc.stage or "upload",
                message=str(exc),
                error=exc,
            )
        except Exception as exc:
            self._fail(PipelineFailure(file_name=file.name, stage="", message=str(exc), error=exc))
            raise

    def _report(self, file: SelectedFile, stage: Stage, index: int, total: int) -> None:
        if stage is Stage.UPLOADING:
            self._status = f"Uploading and processing {file.name}..."
        else:
            self._status = f"Extracting fields for {file.name}..."
        Log.debug(f"[{index + 1}/{total}] {file.name}: {stage.value}")
        if self._on_progress is not None:
            self._on_progress(ProgressEvent(file_name=file.name, stage=stage, index=index, total=total))

    def _fail(self, failure: PipelineFailure) -> None:
        self._state = BatchState.FAILED
        self._result = None
        self._failure = failure
        self._error = failure.message or "Processing failed"
        self._status = f"Error: {self._error}"
        Log.error(f"Batch failed on {failure.file_name} at stage '{failure.stage}': {failure.message}")
