from medfiling.extraction.vocabulary import CATEGORIES, STORE_IN_OPTIONS
from medfiling.logging.logger import Log
from medfiling.pipeline.models import BatchResult, ProcessedDocument
from medfiling.submission.base import BaseSubmissionSink, SubmissionReceipt

FIELD_OPTIONS: dict[str, tuple[str, ...]] = {
    "category": CATEGORIES,
    "store_in": STORE_IN_OPTIONS,
}


class ReviewSession:
    """Holds processed documents for review, the active one, and its edits."""

    def __init__(self, sink: BaseSubmissionSink, batch: BatchResult | None = None) -> None:
        self._sink = sink
        self._documents: list[ProcessedDocument] = []
        self._active_index = 0
        if batch is not None:
            self.load(batch)

    @property
    def documents(self) -> tuple[ProcessedDocument, ...]:
        return tuple(self._documents)

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def is_empty(self) -> bool:
        return not self._documents

    @property
    def active_document(self) -> ProcessedDocument:
        if not self._documents:
            raise IndexError("No documents to review")
        return self._documents[self._active_index]

    def load(self, batch: BatchResult) -> None:
        """Replace the session content with a new batch; the first document is active."""
        self._documents = list(batch)
        self._active_index = 0
        Log.info(f"Review session loaded with {len(self._documents)} document(s)")

    def select(self, index: int) -> ProcessedDocument:
        if not 0 <= index < len(self._documents):
            raise IndexError(
                f"Document index {index} out of range for {len(self._documents)} document(s)"
            )
        self._active_index = index
        return self._documents[index]

    def edit(self, field: str, value: str) -> None:
        """Store value verbatim in the active document's record.

        Raises:
            IndexError: the session holds no documents.
            KeyError: field is not one of the record's fields.
        """
        self.active_document.fields.set(field, value)

    def confirm_current(self) -> SubmissionReceipt:
        """Hand the active record to the sink; the document stays in the session."""
        document = self.active_document
        receipt = self._sink.submit(document.name, document.fields.replace())
        Log.info(f"Confirmed {document.name}: success={receipt.success}")
        return receipt

    def reset(self) -> None:
        self._documents = []
        self._active_index = 0

    @staticmethod
    def options_for(field: str) -> tuple[str, ...] | None:
        """Canonical choices for closed-set fields, None for free text."""
        return FIELD_OPTIONS.get(field)
