from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, replace
from typing import ClassVar


@dataclass
class ExtractedFields:
    """The seven-field filing record for one medical document."""

    FIELD_NAMES: ClassVar[tuple[str, ...]] = (
        "patient_name",
        "date_of_report",
        "subject",
        "contact_of_source",
        "store_in",
        "doctor",
        "category",
    )

    patient_name: str = ""
    date_of_report: str = ""
    subject: str = ""
    contact_of_source: str = ""
    store_in: str = ""
    doctor: str = ""
    category: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "ExtractedFields":
        """Build from a loosely-typed mapping; unknown keys are ignored."""
        values = {}
        for name in cls.FIELD_NAMES:
            raw = data.get(name)
            values[name] = "" if raw is None else str(raw)
        return cls(**values)

    def get(self, name: str) -> str:
        if name not in self.FIELD_NAMES:
            raise KeyError(name)
        return str(getattr(self, name))

    def set(self, name: str, value: str) -> None:
        if name not in self.FIELD_NAMES:
            raise KeyError(name)
        setattr(self, name, value)

    def replace(self, **changes: str) -> "ExtractedFields":
        return replace(self, **changes)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class ExtractionResult:
    """Output of the field extraction step."""

    fields: ExtractedFields
    confidence: str = "high"
    missing_fields: list[str] = field(default_factory=list)
    message: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.confidence == "low"
