import datetime
from typing import Optional

from pydantic import BaseModel


class ReportCreateRequest(BaseModel):
    class_id: Optional[int] = None
    week: Optional[int] = None
    date: Optional[datetime.date] = None
    topic: Optional[str] = None
    learning_outcomes: Optional[str] = None
    recommendations: Optional[str] = None
    actual_students: Optional[int] = None


class ReportFeedbackRequest(BaseModel):
    feedback: Optional[str] = None


class ReportResponse(BaseModel):
    """Public shape of a report, as consumed by the frontend."""
    id: int
    faculty_name: str
    class_name: str
    class_id: int
    week_of_reporting: str
    date_of_lecture: datetime.date
    course_name: str
    course_code: str
    lecturer_name: str
    actual_students_present: int
    total_registered_students: int
    venue: str
    scheduled_time: str
    topic_taught: str
    learning_outcomes: Optional[str] = None
    recommendations: Optional[str] = None
    status: str
    feedback: str
    created_by: int
    created_at: Optional[datetime.datetime] = None


class ReportEnvelope(BaseModel):
    success: bool = True
    report: ReportResponse
