import json
import logging
from typing import Optional, Protocol

from openai import OpenAI, OpenAIError
from pydantic import BaseModel, Field, ValidationError

from health_assess.conditions import CONDITION_TABLE
from health_assess.settings import get_settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You label patient-reported symptom descriptions. "
    'Reply with JSON only: {"label": "<short medical category>", "confidence": <0..1>}.'
)


class ClassifierError(RuntimeError):
    def __init__(self, message: str, *, raw: str | None = None):
        super().__init__(message)
        self.raw = raw


class Classification(BaseModel):
    label: str = Field(..., min_length=1, max_length=80)
    confidence: float = Field(..., ge=0.0, le=1.0)


class TextClassifier(Protocol):
    def classify(self, text: str) -> tuple[str, float]:
        ...


class MockTextClassifier:
    """Offline stand-in: labels text by the first condition category whose keywords it mentions."""

    def classify(self, text: str) -> tuple[str, float]:
        lowered = text.lower()
        for condition in CONDITION_TABLE:
            if any(kw in lowered for kw in condition.keywords):
                return condition.category.lower(), 0.5
        return "unclassified", 0.0


class OpenAITextClassifier:
    def __init__(self, model: str, api_key: str | None = None, client: OpenAI | None = None):
        self.model = model
        self.client = client or OpenAI(api_key=api_key)

    def classify(self, text: str) -> tuple[str, float]:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": text},
                ],
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            raise ClassifierError(f"Classifier request failed: {e}") from e

        raw = resp.choices[0].message.content or ""
        try:
            parsed = Classification.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            raise ClassifierError(f"Classifier output was not a valid label: {e}", raw=raw) from e

        return parsed.label, parsed.confidence


def get_classifier() -> Optional[TextClassifier]:
    s = get_settings()
    if s.classifier_provider == "none":
        return None
    if s.classifier_provider == "mock":
        return MockTextClassifier()
    if s.classifier_provider == "openai":
        return OpenAITextClassifier(model=s.classifier_model, api_key=s.openai_api_key)
    raise ValueError(f"Unsupported CLASSIFIER_PROVIDER: {s.classifier_provider}")


def load_classifier() -> Optional[TextClassifier]:
    """
    Best-effort load. A missing key, bad provider name or client error
    only costs the optional label; scoring never depends on it.
    """
    try:
        return get_classifier()
    except (ValueError, OpenAIError) as e:
        logger.warning("Text classifier unavailable, using rule-based analysis only: %s", e)
        return None
