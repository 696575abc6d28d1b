from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from health_assess.conditions import match_conditions, possible_conditions, disease_category
from health_assess.schema import AssessmentResult, IntakeRecord, Urgency

EMERGENCY_KEYWORDS = {"chest pain", "difficulty breathing", "severe headache", "loss of consciousness"}
HIGH_RISK_KEYWORDS = {"fever", "vomiting", "severe pain", "bleeding"}

EMERGENCY_ADVICE = "Seek immediate emergency care"
URGENT_ADVICE = "Consider urgent medical consultation"
HISTORY_ADVICE = "Inform healthcare provider of your medical history"

# One pair per urgency band, lowest band first.
BAND_ADVICE: Dict[Urgency, tuple[str, str]] = {
    "low": (
        "Monitor symptoms and rest",
        "Consider over-the-counter remedies if appropriate",
    ),
    "medium": (
        "Schedule appointment with primary care physician",
        "Keep track of symptom progression",
    ),
    "high": (
        "Seek medical attention within 24 hours",
        "Avoid strenuous activity",
    ),
    "emergency": (
        "Seek immediate medical attention",
        "Do not drive yourself to medical facility",
    ),
}

MAX_SCORE = 100


class ScoringTable(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    age_over_65: int
    age_over_45: int
    age_under_18: int
    severity_points: Dict[str, int]
    duration_points: Dict[str, int]
    emergency_bonus: int = 40
    high_risk_bonus: int = 25
    history_bonus: int = 5
    low_below: int
    medium_below: int
    high_below: int
    max_recommendations: int


STANDARD = ScoringTable(
    name="standard",
    age_over_65=20,
    age_over_45=10,
    age_under_18=15,
    severity_points={"severe": 30, "moderate": 20, "mild": 10},
    duration_points={"chronic": 15, "weeks": 10, "days": 5, "hours": 0},
    low_below=20,
    medium_below=40,
    high_below=60,
    max_recommendations=4,
)

EXTENDED = ScoringTable(
    name="extended",
    age_over_65=25,
    age_over_45=15,
    age_under_18=10,
    severity_points={"severe": 30, "moderate": 20, "mild": 10},
    duration_points={"chronic": 15, "weeks": 10, "days": 5, "hours": 0},
    low_below=25,
    medium_below=45,
    high_below=65,
    max_recommendations=5,
)

TABLES = {t.name: t for t in (STANDARD, EXTENDED)}


def get_table(variant: str) -> ScoringTable:
    try:
        return TABLES[variant]
    except KeyError:
        raise ValueError(f"Unsupported scoring variant: {variant}") from None


def contains_any(text: str, phrases: set[str]) -> bool:
    return any(p in text for p in phrases)


def age_points(age: Optional[int], table: ScoringTable) -> int:
    if age is None:
        return 0
    if age > 65:
        return table.age_over_65
    if age > 45:
        return table.age_over_45
    if age < 18:
        return table.age_under_18
    return 0


def urgency_for(score: int, table: ScoringTable = STANDARD) -> Urgency:
    if score < table.low_below:
        return "low"
    if score < table.medium_below:
        return "medium"
    if score < table.high_below:
        return "high"
    return "emergency"


def recommendations_for(score: int, table: ScoringTable = STANDARD) -> List[str]:
    return list(BAND_ADVICE[urgency_for(score, table)])


def build_summary(urgency: Urgency, score: int, category: Optional[str] = None) -> str:
    summary = (
        f"Based on your assessment, you have a {urgency} priority health concern "
        f"with a risk score of {score}. This analysis considers your age, symptom "
        f"severity, duration, and reported symptoms."
    )
    if category:
        summary += f" Reported symptoms are most consistent with the {category} category."
    return summary


def calculate_risk_score(record: IntakeRecord, table: ScoringTable = STANDARD) -> AssessmentResult:
    score = 0
    recommendations: List[str] = []
    lowered = record.symptoms.lower()

    score += age_points(record.age, table)
    score += table.severity_points.get(record.severity, 0)
    score += table.duration_points.get(record.duration, 0)

    # Emergency keywords take precedence over high-risk ones
    if contains_any(lowered, EMERGENCY_KEYWORDS):
        score += table.emergency_bonus
        recommendations.append(EMERGENCY_ADVICE)
    elif contains_any(lowered, HIGH_RISK_KEYWORDS):
        score += table.high_risk_bonus
        recommendations.append(URGENT_ADVICE)

    if record.medical_history.strip():
        score += table.history_bonus
        recommendations.append(HISTORY_ADVICE)

    urgency = urgency_for(score, table)
    recommendations.extend(recommendations_for(score, table))
    risk_score = min(score, MAX_SCORE)

    return AssessmentResult(
        risk_score=risk_score,
        urgency=urgency,
        recommendations=recommendations[: table.max_recommendations],
        summary=build_summary(urgency, risk_score),
        variant=table.name,
    )


def analyze(record: IntakeRecord) -> AssessmentResult:
    """
    Extended analysis: the additive score from the extended table plus a disease
    category and up to three possible conditions from the condition table.
    """
    table = EXTENDED
    base = calculate_risk_score(record, table)
    matches = match_conditions(record.symptoms)
    category = disease_category(matches)

    recommendations = list(base.recommendations)
    if matches:
        recommendations.append(f"Discuss possible {category.lower()} causes with a clinician")

    return base.model_copy(
        update={
            "recommendations": recommendations[: table.max_recommendations],
            "summary": build_summary(base.urgency, base.risk_score, category if matches else None),
            "possible_conditions": possible_conditions(matches),
            "disease_category": category,
        }
    )
