from __future__ import annotations

from typing import Literal, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from health_assess.assess import assess_intake
from health_assess.schema import AssessmentResult, IntakeRecord, Variant


app = FastAPI(
    title="Health Risk Assessor API",
    version="0.1.0",
    description="Rule-based risk scoring for self-reported symptom intakes.",
)


class AssessResponse(BaseModel):
    status: Literal["ok"] = "ok"
    result: AssessmentResult


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.post("/api/assess", response_model=AssessResponse)
def api_assess(
    record: IntakeRecord,
    variant: Optional[Variant] = Query(default=None, description="standard or extended; defaults to SCORING_VARIANT"),
) -> AssessResponse:
    try:
        return AssessResponse(result=assess_intake(record, variant=variant))
    except ValueError as e:
        # Unknown SCORING_VARIANT in the environment
        raise HTTPException(status_code=500, detail=str(e)) from e
