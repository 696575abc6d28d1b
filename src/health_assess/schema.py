import math
import re
from typing import Literal, List, Optional

from pydantic import BaseModel, ConfigDict, Field, conlist, field_validator

Gender = Literal["male", "female", "other", "prefer-not-to-say"]
Duration = Literal["hours", "days", "weeks", "chronic"]
Severity = Literal["mild", "moderate", "severe"]
Urgency = Literal["low", "medium", "high", "emergency"]
Variant = Literal["standard", "extended"]

MIN_AGE = 1
MAX_AGE = 120

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class IntakeRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=120)
    age: Optional[int] = Field(...)
    gender: Gender
    symptoms: str = Field(..., min_length=1, max_length=5_000)
    duration: Duration
    severity: Severity
    medical_history: str = Field(default="", max_length=5_000)

    @field_validator("name", "symptoms", mode="before")
    @classmethod
    def strip_required_text(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("medical_history", mode="before")
    @classmethod
    def default_history(cls, v):
        return "" if v is None else v

    @field_validator("age", mode="before")
    @classmethod
    def parse_age(cls, v):
        """
        Form input arrives as text:
        - leading integer wins ("42", " 42 years", "42.9" -> 42)
        - anything non-numeric becomes None and scores no age points
        """
        if v is None or isinstance(v, bool):
            return None
        if isinstance(v, int):
            return v
        if isinstance(v, float):
            if not math.isfinite(v):
                raise ValueError("Age must be a finite number.")
            return int(v)
        if isinstance(v, str):
            m = _LEADING_INT.match(v)
            return int(m.group(1)) if m else None
        return v

    @field_validator("age")
    @classmethod
    def validate_age_range(cls, v):
        if v is not None and not (MIN_AGE <= v <= MAX_AGE):
            raise ValueError(f"Age must be between {MIN_AGE} and {MAX_AGE}.")
        return v


class AssessmentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    risk_score: int = Field(..., ge=0, le=100)
    urgency: Urgency
    recommendations: conlist(str, min_length=1, max_length=5)
    summary: str
    possible_conditions: conlist(str, max_length=3) = []
    disease_category: Optional[str] = None
    variant: Variant = "standard"

    @field_validator("recommendations")
    @classmethod
    def validate_recommendations(cls, v: List[str]) -> List[str]:
        for item in v:
            if not item.strip():
                raise ValueError("Recommendations must be non-empty strings.")
        return v
