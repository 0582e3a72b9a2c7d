"""Closed value sets for the filing record and their normalization rules."""

from medfiling.extraction.models import ExtractedFields

STORE_IN_OPTIONS: tuple[str, ...] = ("Correspondence", "Investigations")
DEFAULT_STORE_IN = "Correspondence"

CATEGORIES: tuple[str, ...] = (
    "Admissions summary",
    "Advance care planning",
    "Allied health letter",
    "Certificate",
    "Clinical notes",
    "Clinical photograph",
    "Consent form",
    "DAS21",
    "Discharge summary",
    "ECG",
    "Email",
    "Form",
    "Immunisation",
    "Indigenous PIP",
    "Letter",
    "Medical imaging report",
    "MyHealth registration",
    "New PT registration form",
    "Pathology results",
    "Patient consent",
    "Record request",
    "Referral letter",
    "Workcover",
    "Workcover consent",
)


def normalize_category(value: str) -> str:
    """Map a model-supplied category onto the canonical label set.

    Canonical values pass through. Otherwise a case-insensitive exact match
    wins, then the first label (in canonical order) that the value contains.
    Anything else is returned unchanged.
    """
    if not value or value in CATEGORIES:
        return value
    lowered = value.lower()
    for category in CATEGORIES:
        if category.lower() == lowered:
            return category
    for category in CATEGORIES:
        if category.lower() in lowered:
            return category
    return value


def normalize_store_in(value: str) -> str:
    return value if value in STORE_IN_OPTIONS else DEFAULT_STORE_IN


def normalize_fields(fields: ExtractedFields) -> ExtractedFields:
    """Return a copy of fields with category and store_in normalized."""
    return fields.replace(
        category=normalize_category(fields.category),
        store_in=normalize_store_in(fields.store_in),
    )
