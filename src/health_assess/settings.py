from pydantic import BaseModel, Field
from dotenv import load_dotenv
import math
import os

load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    try:
        value = float(raw) if raw else default
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return max(value, 0.0)


class Settings(BaseModel):
    scoring_variant: str = Field(default_factory=lambda: os.getenv("SCORING_VARIANT", "standard"))
    classifier_provider: str = Field(default_factory=lambda: os.getenv("CLASSIFIER_PROVIDER", "none"))
    classifier_model: str = Field(default_factory=lambda: os.getenv("CLASSIFIER_MODEL", "gpt-4o-mini"))
    openai_api_key: str | None = Field(default_factory=lambda: os.getenv("OPENAI_API_KEY"))
    display_delay_seconds: float = Field(
        default_factory=lambda: _env_float("DISPLAY_DELAY_SECONDS", 1.5), ge=0.0
    )


def get_settings() -> Settings:
    # re-read env each time (good for tests)
    return Settings()
