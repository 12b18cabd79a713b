import logging
import re
from io import BytesIO

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse

from core.assessment import AssessmentError, load_report, submit_assessment
from core.config import FRONTEND_ORIGINS, LOG_LEVEL
from core.form_options import form_options
from core.pdf_report import build_pdf_report
from core.storage import Storage, build_storage
from models import (
    FormOptionsResponse,
    AssessmentForm,
    ReportResponse,
    SubmitAssessmentResponse,
    ValidationIssue,
)

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="COMPASS Insight Report API", version="0.1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

storage = build_storage()


def get_storage() -> Storage:
    return storage


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error_body(message: str, **extra) -> dict:
    return {"success": False, "message": message, **extra}


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


@app.exception_handler(AssessmentError)
async def assessment_error_handler(request: Request, exc: AssessmentError):
    return JSONResponse(status_code=404, content=_error_body(str(exc)))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    issues = []
    for err in exc.errors():
        loc = list(err.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        issues.append(
            ValidationIssue(code=err.get("type", "invalid"), message=err.get("msg", ""), path=loc).model_dump()
        )
    logger.warning("Rejected submission on %s: %d validation issue(s)", request.url.path, len(issues))
    return JSONResponse(status_code=400, content=_error_body("Validation error", errors=issues))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=_error_body("An unexpected error occurred"))


_REPORT_ID_RE = re.compile(r"[+-]?[0-9]+")


def _parse_report_id(raw: str) -> int:
    # ASCII digits only; int() alone would take "1_0" or padded values
    if not _REPORT_ID_RE.fullmatch(raw):
        raise ApiError(400, "Invalid report ID")
    return int(raw)


@app.get("/")
def root(store: Storage = Depends(get_storage)):
    return {"message": "COMPASS Insight Report API is running", "storage": store.storage_name}


@app.get("/api/form-options", response_model=FormOptionsResponse)
def form_options_endpoint():
    return form_options()


@app.post("/api/submit-assessment", response_model=SubmitAssessmentResponse, status_code=201)
def submit_assessment_endpoint(submission: AssessmentForm, store: Storage = Depends(get_storage)):
    startup, report = submit_assessment(store, submission)
    return SubmitAssessmentResponse(startup_id=startup.id, report_id=report.id)


@app.get("/api/report/{report_id}", response_model=ReportResponse)
def report_endpoint(report_id: str, store: Storage = Depends(get_storage)):
    report, startup = load_report(store, _parse_report_id(report_id))
    return ReportResponse(report=report, startup=startup)


@app.get("/api/report/{report_id}/pdf")
def report_pdf_endpoint(report_id: str, store: Storage = Depends(get_storage)):
    parsed_id = _parse_report_id(report_id)
    report, startup = load_report(store, parsed_id)
    buffer = BytesIO(build_pdf_report(report, startup))
    headers = {
        "Content-Disposition": f'attachment; filename="compass-insight-report-{parsed_id}.pdf"'
    }
    return StreamingResponse(buffer, media_type="application/pdf", headers=headers)
