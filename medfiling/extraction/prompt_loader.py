from pathlib import Path

from medfiling.extraction.exceptions import ExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the extraction prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled extraction_prompt.txt.

    Returns:
        The raw template string with {categories} and {document_text}
        placeholders.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the response JSON schema, bundled extraction_schema.json by default."""
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load JSON schema: {exc}") from exc
