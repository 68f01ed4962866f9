import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

class Report(SQLModel, table=True):
    __tablename__ = "report"
    report_id: Optional[int] = Field(default=None, primary_key=True)
    class_id: int = Field(foreign_key="classes.id", index=True)
    week: int
    date: datetime.date
    topic: str
    learning_outcomes: Optional[str] = None
    recommendations: Optional[str] = None
    actual_students: int
    submitted_by: int = Field(foreign_key="users.user_id", index=True)
    feedback: Optional[str] = None
    created_at: datetime.datetime = Field(default_factory=lambda: datetime.datetime.now(datetime.UTC))
