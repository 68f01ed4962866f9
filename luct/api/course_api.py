from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List

from luct.configs.database import get_db
from luct.schemas.course_schema import CourseDeleteResponse, CourseRequest, CourseResponse
from luct.services import course_service

# No authentication on courses, the admin screens call these directly
router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=List[CourseResponse])
def list_all(db: Session = Depends(get_db)):
    return course_service.list_all(db)


@router.get("/{course_id}", response_model=CourseResponse)
def get_course(course_id: int, db: Session = Depends(get_db)):
    return course_service.get_course(db, course_id)


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
def create_course(course_req: CourseRequest, db: Session = Depends(get_db)):
    return course_service.create_course(db, course_req)


@router.put("/{course_id}", response_model=CourseResponse)
def update_course(course_id: int, course_req: CourseRequest, db: Session = Depends(get_db)):
    return course_service.update_course(db, course_id, course_req)


@router.delete("/{course_id}", response_model=CourseDeleteResponse)
def delete_course(course_id: int, db: Session = Depends(get_db)):
    return {"message": "Course deleted successfully", "course": course_service.delete_course(db, course_id)}
