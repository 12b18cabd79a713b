import logging
from typing import Tuple

from core.insights import compose_report
from core.scoring import explain_scores, feasibility_score, usefulness_score
from core.storage import Storage
from models import NewStartup, Report, Startup, StartupSubmission, utc_now_iso

logger = logging.getLogger(__name__)


class AssessmentError(Exception):
    """Base error for lookups that cannot be served."""


class ReportNotFound(AssessmentError):
    def __init__(self, report_id: int):
        super().__init__("Report not found")
        self.report_id = report_id


class StartupNotFound(AssessmentError):
    def __init__(self, startup_id: int):
        super().__init__("Startup data not found")
        self.startup_id = startup_id


def submit_assessment(storage: Storage, submission: StartupSubmission) -> Tuple[Startup, Report]:
    """
    Enregistre la startup, calcule les scores puis stocke le rapport associé.
    """
    startup = storage.create_startup(
        NewStartup(**submission.model_dump(), created_at=utc_now_iso())
    )

    feasibility = feasibility_score(submission)
    usefulness = usefulness_score(submission)
    logger.info("startup_id=%s scores: %s", startup.id, explain_scores(submission))

    report = storage.create_report(compose_report(startup, feasibility, usefulness))
    logger.info("startup_id=%s report_id=%s created", startup.id, report.id)
    return startup, report


def load_report(storage: Storage, report_id: int) -> Tuple[Report, Startup]:
    report = storage.get_report(report_id)
    if report is None:
        logger.warning("report_id=%s not found", report_id)
        raise ReportNotFound(report_id)

    startup = storage.get_startup(report.startup_id)
    if startup is None:
        logger.warning("report_id=%s references missing startup_id=%s", report_id, report.startup_id)
        raise StartupNotFound(report.startup_id)

    return report, startup
