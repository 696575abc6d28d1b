import pytest
from pydantic import ValidationError

from health_assess.schema import AssessmentResult, IntakeRecord

VALID = {
    "name": "Sam",
    "age": "42",
    "gender": "female",
    "symptoms": "runny nose",
    "duration": "days",
    "severity": "mild",
}


def test_schema_parses_form_age_text():
    record = IntakeRecord.model_validate(VALID)
    assert record.age == 42
    assert record.medical_history == ""


@pytest.mark.parametrize("raw, expected", [
    (" 42 years", 42),
    ("42.9", 42),
    ("abc", None),
    ("", None),
    (None, None),
])
def test_schema_age_uses_leading_integer(raw, expected):
    record = IntakeRecord.model_validate({**VALID, "age": raw})
    assert record.age == expected


@pytest.mark.parametrize("age", [0, 121, "-5", "500"])
def test_schema_rejects_out_of_range_age(age):
    with pytest.raises(ValidationError):
        IntakeRecord.model_validate({**VALID, "age": age})


@pytest.mark.parametrize("field", ["name", "symptoms"])
def test_schema_rejects_blank_required_text(field):
    with pytest.raises(ValidationError):
        IntakeRecord.model_validate({**VALID, field: "   "})


@pytest.mark.parametrize("field, value", [
    ("gender", "unknown"),
    ("duration", "months"),
    ("severity", "critical"),
])
def test_schema_rejects_unknown_enum_values(field, value):
    with pytest.raises(ValidationError):
        IntakeRecord.model_validate({**VALID, field: value})


def test_schema_record_is_frozen():
    record = IntakeRecord.model_validate(VALID)
    with pytest.raises(ValidationError):
        record.severity = "severe"


def test_schema_rejects_score_above_100():
    with pytest.raises(ValidationError):
        AssessmentResult(
            risk_score=105,
            urgency="emergency",
            recommendations=["Seek immediate medical attention"],
            summary="x",
        )


def test_schema_requires_at_least_one_recommendation():
    with pytest.raises(ValidationError):
        AssessmentResult(risk_score=10, urgency="low", recommendations=[], summary="x")


@pytest.mark.parametrize("age", [float("inf"), float("-inf"), float("nan")])
def test_schema_rejects_non_finite_age(age):
    with pytest.raises(ValidationError):
        IntakeRecord.model_validate({**VALID, "age": age})
