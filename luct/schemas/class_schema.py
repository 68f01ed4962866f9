from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ClassCreateRequest(BaseModel):
    class_name: Optional[str] = None
    course_name: Optional[str] = None
    course_code: Optional[str] = None
    lecturer: Optional[str] = None
    schedule: Optional[str] = None
    venue: Optional[str] = None
    capacity: Optional[int] = None
    status: Optional[str] = None


class ClassUpdateRequest(ClassCreateRequest):
    """Partial update, only the fields sent by the client are applied."""


class ClassResponse(BaseModel):
    id: int
    class_name: str
    course_name: str
    course_code: str
    lecturer: str
    schedule: Optional[str] = None
    venue: Optional[str] = None
    capacity: Optional[int] = None
    status: str
    created_by: str
    created_by_id: Optional[int] = None
    created_at: Optional[datetime] = None


class ClassOption(BaseModel):
    id: int
    class_name: str
    course_name: str
    course_code: str
    lecturer: str

