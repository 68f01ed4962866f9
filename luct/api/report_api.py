from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from luct.auth.auth_handler import get_current_user
from luct.auth.policy import require
from luct.configs.database import get_db
from luct.schemas.report_schema import ReportCreateRequest, ReportEnvelope, ReportFeedbackRequest, ReportResponse
from luct.schemas.user_schema import Identity
from luct.services import report_service

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("", response_model=List[ReportResponse])
def list_reports(current_user: Identity = Depends(get_current_user), db: Session = Depends(get_db)):
    return report_service.list_reports(db, current_user)


@router.post("", response_model=ReportEnvelope, status_code=status.HTTP_201_CREATED)
def create_report(
    report_req: ReportCreateRequest,
    current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ReportEnvelope(report=report_service.create_report(db, current_user, report_req))


@router.get("/{report_id}", response_model=ReportResponse)
def get_report(report_id: int, current_user: Identity = Depends(get_current_user), db: Session = Depends(get_db)):
    return report_service.get_report(db, current_user, report_id)


@router.put("/{report_id}", response_model=ReportEnvelope)
def add_feedback(
    report_id: int,
    feedback_req: ReportFeedbackRequest,
    current_user: Identity = Depends(require("report.feedback")),
    db: Session = Depends(get_db),
):
    """Attach PRL feedback to a report. The feedback is stored with the report."""
    return ReportEnvelope(report=report_service.add_feedback(db, current_user, report_id, feedback_req))
