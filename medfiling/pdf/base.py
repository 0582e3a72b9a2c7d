from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class PdfContent:
    """Text and document details read from one PDF."""

    text: str
    pages: int
    info: dict[str, str] = field(default_factory=dict)


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, path: Path) -> PdfContent:
        """Extract plain text from a PDF file on disk.

        Args:
            path: Location of the staged PDF file.

        Returns:
            PdfContent with the stripped text, page count and metadata.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
