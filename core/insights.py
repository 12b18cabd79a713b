from typing import Optional

from core.report_data import (
    DESIGN_RECOMMENDATIONS,
    FAILURE_CASES,
    PATIENT_THEMES,
    SENTIMENT_THEMES,
)
from models import NewReport, Startup, StartupSubmission, utc_now_iso

OBJECTIVE_SOLUTION_CHARS = 100


def innovation_objective(data: StartupSubmission) -> str:
    # Plain slice; may cut a word in half.
    solution = data.solution_statement[:OBJECTIVE_SOLUTION_CHARS]
    return (
        f"{data.startup_name} aims to address the needs of "
        f"{', '.join(data.diabetes_types)} patients by {solution}..."
    )


def patient_insights_summary(data: StartupSubmission) -> str:
    return (
        "Patient interviews reveal a strong desire for simplicity in diabetes management tools. "
        "Many express frustration with the cognitive burden of tracking multiple health metrics "
        "simultaneously. There's a clear preference for automation where possible, while still "
        "maintaining transparency about how recommendations are generated."
    )


def failure_insights_summary(data: StartupSubmission) -> str:
    return (
        "Analysis of diabetes management startups that failed in the past five years reveals "
        "common patterns. Many struggled with user retention after initial sign-up, suggesting "
        "difficulty in proving ongoing value. Healthcare provider integration was another common "
        "challenge, with many solutions failing to fit seamlessly into clinical workflows."
    )


def sentiment_summary(data: StartupSubmission) -> str:
    return (
        "Analysis of diabetes app reviews and patient forum discussions reveals growing "
        "frustration with the proliferation of single-purpose health apps. Many patients express "
        "reluctance to add another app to their digital health toolkit unless it offers "
        "significant advantages over existing solutions. There's also strong interest in tools "
        "that help interpret data rather than just collecting it."
    )


def failure_takeaway(data: StartupSubmission) -> str:
    focus_areas = []
    if len(data.self_management_features) > 3:
        focus_areas.append("feature overload")
    if data.clinical_features:
        focus_areas.append("clinical integration")
    if data.ai_features:
        focus_areas.append("user adoption of AI features")

    focus_text = ", ".join(focus_areas) if focus_areas else "user retention and workflow integration"

    return (
        f"Startups in this space have struggled with {focus_text}. Consider how your innovation "
        "can proactively address these challenges through design or implementation strategy that "
        "focuses on demonstrating ongoing value and fitting seamlessly into existing workflows."
    )


def assessment_summary(data: StartupSubmission, feasibility: int, usefulness: int) -> str:
    """
    Synthèse finale : forces détectées, principal risque et opportunité clé.
    """
    strengths = []
    if data.self_management_features:
        strengths.append("self-management tools")
    if "Automated insights" in data.ai_features:
        strengths.append("data insights")
    if "Data sharing with provider" in data.clinical_features:
        strengths.append("clinical data sharing")

    strengths_text = " and ".join(strengths) if strengths else "innovative approach"

    risk_area = (
        "achieving technical implementation within resource constraints"
        if feasibility < 4
        else "clinical workflow integration"
    )
    opportunity = (
        "reducing the cognitive burden for patients while providing actionable insights"
        if usefulness > 3
        else "focusing on a core set of high-value features before expanding"
    )

    return (
        "Your innovation shows strong potential to address real patient needs, with particular "
        f"strengths in {strengths_text}. The main risk lies in {risk_area}, while a key "
        f"opportunity exists in {opportunity}. Your approach aligns well with COMPASS values, "
        "particularly in elevating patient voice through your feature selection."
    )


def compose_report(
    startup: Startup,
    feasibility: int,
    usefulness: int,
    created_at: Optional[str] = None,
) -> NewReport:
    """
    Assemble le rapport complet pour une startup déjà enregistrée.
    """
    return NewReport(
        startup_id=startup.id,
        innovation_objective=innovation_objective(startup),
        patient_insights_summary=patient_insights_summary(startup),
        patient_themes=PATIENT_THEMES,
        failure_insights_summary=failure_insights_summary(startup),
        failure_data=FAILURE_CASES,
        failure_takeaway=failure_takeaway(startup),
        sentiment_summary=sentiment_summary(startup),
        sentiment_themes=SENTIMENT_THEMES,
        design_recommendations=list(DESIGN_RECOMMENDATIONS),
        feasibility_score=feasibility,
        usefulness_score=usefulness,
        assessment_summary=assessment_summary(startup, feasibility, usefulness),
        created_at=created_at or utc_now_iso(),
    )
