"""AI-powered filing field extractor."""

import json
import re
from collections.abc import Callable
from datetime import date, datetime, timezone
from pathlib import Path

from medfiling.extraction.base import BaseFieldExtractor
from medfiling.extraction.client_base import BaseExtractionClient
from medfiling.extraction.exceptions import ExtractionError
from medfiling.extraction.models import ExtractedFields, ExtractionResult
from medfiling.extraction.prompt_loader import load_json_schema, load_prompt_template
from medfiling.extraction.validator import validate_and_build
from medfiling.extraction.vocabulary import CATEGORIES
from medfiling.logging.logger import Log

MISSING_API_KEY = "API key not configured"
FALLBACK_MESSAGE = "Using fallback data - please configure an API key for AI extraction"

_FENCE_RE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)
_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def fallback_fields(today: date) -> ExtractedFields:
    """Placeholder record returned when no AI provider is configured."""
    return ExtractedFields(
        patient_name="Sample Patient Name",
        date_of_report=today.isoformat(),
        subject="Medical document review",
        contact_of_source="Sample Medical Facility",
        store_in="Correspondence",
        doctor="Dr. Sample Doctor",
        category="Letter",
    )


class FieldExtractor(BaseFieldExtractor):
    """Extracts the filing record from document text using an AI provider.

    Without a client the extractor runs in degraded mode and returns the
    fallback record with low confidence.
    """

    def __init__(
        self,
        *,
        client: BaseExtractionClient | None,
        model: str = "",
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
        today: Callable[[], date] = _utc_today,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = system_prompt
        self._today = today
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema_dict = json.loads(load_json_schema(json_schema_path))

    @property
    def configured(self) -> bool:
        return self._client is not None

    def extract(self, text: str) -> ExtractionResult:
        if self._client is None:
            Log.warning("No AI provider API key configured, returning fallback record")
            return ExtractionResult(
                fields=fallback_fields(self._today()),
                confidence="low",
                missing_fields=[MISSING_API_KEY],
                message=FALLBACK_MESSAGE,
            )

        prompt = self._build_prompt(text)
        Log.debug(f"Extraction prompt:\n{prompt}")

        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema_dict,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        result = validate_and_build(self._parse_json(raw_response))
        Log.info(
            f"Extraction complete: category={result.fields.category!r}, "
            f"{len(result.missing_fields)} missing fields"
        )
        return result

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(
            categories=", ".join(CATEGORIES),
            document_text=text,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = _FENCE_RE.sub("", raw).replace("```", "").strip()
        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError:
            match = _OBJECT_RE.search(cleaned)
            if match is None:
                raise ExtractionError("No valid JSON found in AI response") from None
            try:
                parsed = json.loads(match.group(0))
            except json.JSONDecodeError as exc:
                raise ExtractionError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise ExtractionError("JSON response must be an object")
        return parsed
