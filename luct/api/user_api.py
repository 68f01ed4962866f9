from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from luct.configs.database import get_db
from luct.schemas.user_schema import LecturerResponse
from luct.services import user_service

router = APIRouter(prefix="/lecturers", tags=["users"])

# Open endpoint, the frontend fills its lecturer dropdown before login
@router.get("", response_model=List[LecturerResponse])
def list_lecturers(db: Session = Depends(get_db)):
    return user_service.list_lecturers(db)
