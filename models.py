from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError
from datetime import datetime, timezone
from typing import List, Optional, Union

from core.form_options import (
    AiFeature,
    ClinicalFeature,
    DiabetesType,
    PeerFeature,
    SelfManagementFeature,
)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# Minimum lengths and the messages shown next to the form fields.
_REQUIRED_TEXT = {
    "startup_name": (1, "Startup name is required"),
    "first_name": (1, "First name is required"),
    "last_name": (1, "Last name is required"),
    "target_audience": (10, "Please provide more details about your target audience"),
    "diabetes_types": (1, "Select at least one diabetes type"),
    "problem_statement": (10, "Please provide a detailed problem statement"),
    "solution_statement": (10, "Please provide a detailed solution statement"),
}


class StartupSubmission(RecordModel):
    """
    Validated intake form. Optional feature lists are always lists here:
    absent or null values from the client become empty lists.
    """

    startup_name: str
    first_name: str
    last_name: str
    target_audience: str
    diabetes_types: List[DiabetesType]
    problem_statement: str
    solution_statement: str
    self_management_features: List[SelfManagementFeature] = Field(default_factory=list)
    other_self_management: Optional[str] = None
    ai_features: List[AiFeature] = Field(default_factory=list)
    other_ai_features: Optional[str] = None
    clinical_features: List[ClinicalFeature] = Field(default_factory=list)
    other_clinical: Optional[str] = None
    peer_features: List[PeerFeature] = Field(default_factory=list)
    other_peer: Optional[str] = None

    @field_validator(*_REQUIRED_TEXT.keys())
    @classmethod
    def _check_min_length(cls, value, info: ValidationInfo):
        minimum, message = _REQUIRED_TEXT[info.field_name]
        if len(value) < minimum:
            raise PydanticCustomError("too_small", message)
        return value

    @field_validator(
        "self_management_features",
        "ai_features",
        "clinical_features",
        "peer_features",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


class AssessmentForm(StartupSubmission):
    """Request body of the intake form. Only the camelCase keys are accepted."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=False,
        validate_by_name=False,
        validate_by_alias=True,
        frozen=True,
    )


class NewStartup(StartupSubmission):
    created_at: str


class Startup(NewStartup):
    id: int


class PatientTheme(RecordModel):
    theme: str
    quote: str
    insight: str


class FailureCase(RecordModel):
    startup: str
    year: int
    sector: str
    reason: str
    theme: str


class SentimentTheme(RecordModel):
    theme: str
    quote: str
    implication: str


class NewReport(RecordModel):
    startup_id: int
    innovation_objective: str
    patient_insights_summary: str
    patient_themes: List[PatientTheme]
    failure_insights_summary: str
    failure_data: List[FailureCase]
    failure_takeaway: str
    sentiment_summary: str
    sentiment_themes: List[SentimentTheme]
    design_recommendations: List[str]
    feasibility_score: int = Field(ge=1, le=5)
    usefulness_score: int = Field(ge=1, le=5)
    assessment_summary: str
    created_at: str


class Report(NewReport):
    id: int


class NewUser(RecordModel):
    username: str
    password: str


class User(NewUser):
    id: int


class FormOptionsResponse(CamelModel):
    diabetes_types: List[str]
    self_management_features: List[str]
    ai_features: List[str]
    clinical_features: List[str]
    peer_features: List[str]


class SubmitAssessmentResponse(CamelModel):
    success: bool = True
    startup_id: int
    report_id: int


class ReportResponse(CamelModel):
    success: bool = True
    report: Report
    startup: Startup


class ValidationIssue(CamelModel):
    code: str
    message: str
    path: List[Union[str, int]]
