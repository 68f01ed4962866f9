from typing import List
from sqlmodel import Session, select

from luct.models import Course
from luct.schemas.course_schema import CourseRequest
from luct.utils.errors import NotFound, store_guard


def list_all(db: Session) -> List[Course]:
    with store_guard("Failed to fetch courses"):
        statement = select(Course).order_by(Course.course_id.desc())
        return db.exec(statement).all()


def get_course(db: Session, course_id: int) -> Course:
    with store_guard("Failed to fetch course"):
        course = db.get(Course, course_id)
    if not course:
        raise NotFound("Course not found")
    return course


# Fields go straight to the table, NOT NULL columns are the only check
def create_course(db: Session, course_req: CourseRequest) -> Course:
    course = Course(**course_req.model_dump())
    with store_guard("Failed to create course"):
        db.add(course)
        db.commit()
        db.refresh(course)
    return course


def update_course(db: Session, course_id: int, course_req: CourseRequest) -> Course:
    course = get_course(db, course_id)
    for key, value in course_req.model_dump(exclude_unset=True).items():
        setattr(course, key, value)
    with store_guard("Failed to update course"):
        db.add(course)
        db.commit()
        db.refresh(course)
    return course


def delete_course(db: Session, course_id: int) -> dict:
    course = get_course(db, course_id)
    snapshot = course.model_dump()
    with store_guard("Failed to delete course"):
        db.delete(course)
        db.commit()
    return snapshot
