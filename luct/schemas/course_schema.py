from typing import Optional

from pydantic import BaseModel


class CourseRequest(BaseModel):
    course_code: Optional[str] = None
    course_name: Optional[str] = None
    faculty: Optional[str] = None


class CourseResponse(BaseModel):
    course_id: int
    course_code: str
    course_name: str
    faculty: str


class CourseDeleteResponse(BaseModel):
    message: str = "Course deleted successfully"
    course: CourseResponse
