from typing import Optional
from sqlmodel import SQLModel, Field

class Course(SQLModel, table=True):
    __tablename__ = "courses"
    course_id: Optional[int] = Field(default=None, primary_key=True)
    course_code: str
    course_name: str
    faculty: str
