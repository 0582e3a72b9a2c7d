from abc import ABC, abstractmethod
from dataclasses import dataclass

from medfiling.extraction.models import ExtractedFields


@dataclass(frozen=True)
class SubmissionReceipt:
    success: bool
    file_name: str


class BaseSubmissionSink(ABC):
    """Contract for destinations of confirmed filing records."""

    @abstractmethod
    def submit(self, file_name: str, fields: ExtractedFields) -> SubmissionReceipt:
        """Deliver one document's finalized record.

        Raises:
            SubmissionError: if the record could not be delivered.
        """
