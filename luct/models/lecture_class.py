from datetime import datetime, UTC
from typing import Optional

from sqlmodel import SQLModel, Field

class Class(SQLModel, table=True):
    __tablename__ = "classes"
    id: Optional[int] = Field(default=None, primary_key=True)
    class_name: str
    course_name: str
    course_code: str
    lecturer: str
    schedule: Optional[str] = None
    venue: Optional[str] = None
    capacity: Optional[int] = None
    status: str = Field(default="active")
    # Display name of the creator; ownership checks use created_by_id
    created_by: str
    created_by_id: Optional[int] = Field(default=None, foreign_key="users.user_id", index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
