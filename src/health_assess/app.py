from __future__ import annotations
import asyncio
from pathlib import Path
import logging

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from health_assess.assess import assess_intake
from health_assess.schema import IntakeRecord
from health_assess.settings import get_settings

logger = logging.getLogger(__name__)

GENERIC_USER_ERROR = (
    "We couldn’t complete the assessment. "
    "Please retry or contact support."
)

app = FastAPI(title="Health Assessment", version="0.1.0")

BASE_DIR = Path(__file__).resolve().parents[2]
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

BLANK_FORM = {
    "name": "",
    "age": "",
    "gender": "",
    "symptoms": "",
    "duration": "",
    "severity": "",
    "medical_history": "",
}


def _format_validation_error(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        field = ".".join(str(loc) for loc in err.get("loc", ())) or "form"
        parts.append(f"{field.replace('_', ' ')}: {err.get('msg', 'invalid value')}")
    return "Please check the form. " + "; ".join(parts)


async def _display_pause(seconds: float) -> None:
    # "Analyzing..." pause before the results view
    await asyncio.sleep(seconds)


def _render_form(request: Request, form: dict, error_message: str | None = None) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"form": form, "error_message": error_message},
        status_code=200,
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index(request: Request) -> HTMLResponse:
    return _render_form(request, dict(BLANK_FORM))


@app.post("/assess", response_class=HTMLResponse)
async def assess_route(
    request: Request,
    name: str = Form(default=""),
    age: str = Form(default=""),
    gender: str = Form(default=""),
    symptoms: str = Form(default=""),
    duration: str = Form(default=""),
    severity: str = Form(default=""),
    medical_history: str = Form(default=""),
) -> HTMLResponse:
    form = {
        "name": name,
        "age": age,
        "gender": gender,
        "symptoms": symptoms,
        "duration": duration,
        "severity": severity,
        "medical_history": medical_history,
    }

    try:
        record = IntakeRecord.model_validate(form)
    except ValidationError as e:
        return _render_form(request, form, _format_validation_error(e))

    s = get_settings()
    if s.display_delay_seconds:
        await _display_pause(s.display_delay_seconds)

    try:
        result = await run_in_threadpool(assess_intake, record)
    except Exception:
        logger.exception("Assessment request failed")
        return _render_form(request, form, GENERIC_USER_ERROR)

    return templates.TemplateResponse(
        request,
        "result.html",
        {"record": record.model_dump(), "result": result.model_dump()},
    )


@app.get("/reset")
def reset() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=302)
