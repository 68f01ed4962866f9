import logging
from typing import List, Optional

from sqlmodel import Session, select

from luct.auth.policy import authorize, owner_scoped
from luct.models import Class, Report, User
from luct.schemas.report_schema import ReportCreateRequest, ReportFeedbackRequest, ReportResponse
from luct.schemas.user_schema import Identity
from luct.utils.errors import NotFound, require_fields, store_guard
from luct.utils.utils import (
    UNTRACKED_REPORT_FIELDS, UNKNOWN_CLASS, UNKNOWN_COURSE, UNKNOWN_COURSE_CODE, UNKNOWN_LECTURER, format_week,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("class_id", "week", "date", "topic", "actual_students")


def to_report_response(report: Report, lecture_class: Optional[Class], submitter: Optional[User]) -> ReportResponse:
    """Reshape a report row and its joins into the public report schema.

    Total over missing joins: a report whose class or submitter is gone still
    gets every field, with fallback labels.
    """
    class_name = lecture_class.class_name if lecture_class else None
    course_name = lecture_class.course_name if lecture_class else None
    course_code = lecture_class.course_code if lecture_class else None
    lecturer_name = (lecture_class.lecturer if lecture_class else None) or (submitter.name if submitter else None)

    return ReportResponse(
        id=report.report_id,
        class_name=class_name or UNKNOWN_CLASS,
        class_id=report.class_id,
        week_of_reporting=format_week(report.week),
        date_of_lecture=report.date,
        course_name=course_name or UNKNOWN_COURSE,
        course_code=course_code or UNKNOWN_COURSE_CODE,
        lecturer_name=lecturer_name or UNKNOWN_LECTURER,
        actual_students_present=report.actual_students,
        topic_taught=report.topic,
        learning_outcomes=report.learning_outcomes,
        recommendations=report.recommendations,
        feedback=report.feedback or "",
        created_by=report.submitted_by,
        created_at=report.created_at,
        **UNTRACKED_REPORT_FIELDS,
    )


def _joined_reports():
    return (
        select(Report, Class, User)
        .join(Class, Report.class_id == Class.id, isouter=True)
        .join(User, Report.submitted_by == User.user_id, isouter=True)
    )


def _fetch_one(db: Session, report_id: int):
    with store_guard("Failed to fetch report"):
        row = db.exec(_joined_reports().where(Report.report_id == report_id)).first()
    if not row:
        raise NotFound("Report not found")
    return row


def list_reports(db: Session, caller: Identity) -> List[ReportResponse]:
    statement = _joined_reports().order_by(Report.created_at.desc(), Report.report_id.desc())
    if owner_scoped(caller, "report.view"):
        statement = statement.where(Report.submitted_by == caller.id)
    with store_guard("Failed to fetch reports"):
        rows = db.exec(statement).all()
    return [to_report_response(*row) for row in rows]


def create_report(db: Session, caller: Identity, report_req: ReportCreateRequest) -> ReportResponse:
    require_fields(report_req.model_dump(), REQUIRED_FIELDS)
    with store_guard("Failed to create report"):
        lecture_class = db.get(Class, report_req.class_id)
    if not lecture_class:
        raise NotFound("Class not found")

    report = Report(
        class_id=report_req.class_id,
        week=report_req.week,
        date=report_req.date,
        topic=report_req.topic,
        learning_outcomes=report_req.learning_outcomes or None,
        recommendations=report_req.recommendations or None,
        actual_students=report_req.actual_students,
        submitted_by=caller.id,
    )
    with store_guard("Failed to create report"):
        db.add(report)
        db.commit()
        db.refresh(report)
    logger.info(f"Report {report.report_id} submitted by user {caller.id} for class {report.class_id}")
    return to_report_response(*_fetch_one(db, report.report_id))


def get_report(db: Session, caller: Identity, report_id: int) -> ReportResponse:
    report, lecture_class, submitter = _fetch_one(db, report_id)
    authorize(caller, "report.view", owner_id=report.submitted_by)
    return to_report_response(report, lecture_class, submitter)


def add_feedback(db: Session, caller: Identity, report_id: int, feedback_req: ReportFeedbackRequest) -> ReportResponse:
    authorize(caller, "report.feedback")
    report, lecture_class, submitter = _fetch_one(db, report_id)

    # A body without "feedback" leaves the stored text alone, null or "" clears it
    if "feedback" not in feedback_req.model_fields_set:
        return to_report_response(report, lecture_class, submitter)

    report.feedback = feedback_req.feedback or None
    with store_guard("Failed to update report"):
        db.add(report)
        db.commit()
        db.refresh(report)
    logger.info(f"Feedback on report {report_id} saved by user {caller.id}")
    return to_report_response(report, lecture_class, submitter)
