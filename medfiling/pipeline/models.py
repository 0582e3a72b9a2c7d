import mimetypes
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from medfiling.extraction.models import ExtractedFields


@dataclass(frozen=True)
class SelectedFile:
    """A user-chosen file: name, declared content type and size, and bytes."""

    name: str
    content_type: str
    size: int
    data: bytes = field(repr=False)

    @classmethod
    def from_bytes(cls, name: str, data: bytes, content_type: str | None = None) -> "SelectedFile":
        if content_type is None:
            content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"
        return cls(name=name, content_type=content_type, size=len(data), data=data)

    @classmethod
    def from_path(cls, path: Path) -> "SelectedFile":
        return cls.from_bytes(path.name, path.read_bytes())


@dataclass
class ProcessedDocument:
    """One file paired with its (editable) filing record."""

    file: SelectedFile
    fields: ExtractedFields
    confidence: str = "high"
    missing_fields: list[str] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.file.name


@dataclass(frozen=True)
class BatchResult:
    """Ordered documents produced by one successful batch run."""

    documents: tuple[ProcessedDocument, ...] = ()

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[ProcessedDocument]:
        return iter(self.documents)

    def __getitem__(self, index: int) -> ProcessedDocument:
        return self.documents[index]

    @classmethod
    def of(cls, documents: Sequence[ProcessedDocument]) -> "BatchResult":
        return cls(documents=tuple(documents))


@dataclass(frozen=True)
class PipelineFailure:
    """Names the file and stage at which a pipeline run failed."""

    file_name: str
    stage: str
    message: str
    error: Exception | None = field(default=None, repr=False, compare=False)


PipelineOutcome = ProcessedDocument | PipelineFailure


class BatchState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class Stage(str, Enum):
    UPLOADING = "uploading"
    EXTRACTING = "extracting"


@dataclass(frozen=True)
class ProgressEvent:
    file_name: str
    stage: Stage
    index: int
    total: int
