from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from luct.auth.auth_handler import get_current_user
from luct.configs.database import get_db
from luct.schemas.class_schema import ClassCreateRequest, ClassOption, ClassResponse, ClassUpdateRequest
from luct.schemas.user_schema import Identity
from luct.services import class_service

router = APIRouter(prefix="/classes", tags=["classes"])


@router.get("", response_model=List[ClassResponse])
def list_classes(current_user: Identity = Depends(get_current_user), db: Session = Depends(get_db)):
    return class_service.list_all(db)


@router.get("/options", response_model=List[ClassOption])
def list_class_options(current_user: Identity = Depends(get_current_user), db: Session = Depends(get_db)):
    return class_service.list_options(db, current_user)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_class(
    class_req: ClassCreateRequest,
    current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    lecture_class = class_service.create_class(db, current_user, class_req)
    return {"success": True, "class": ClassResponse.model_validate(lecture_class, from_attributes=True)}


@router.put("/{class_id}")
def update_class(
    class_id: int,
    patch: ClassUpdateRequest,
    current_user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    lecture_class = class_service.update_class(db, current_user, class_id, patch)
    return {"success": True, "class": ClassResponse.model_validate(lecture_class, from_attributes=True)}


@router.delete("/{class_id}")
def delete_class(class_id: int, current_user: Identity = Depends(get_current_user), db: Session = Depends(get_db)):
    class_service.delete_class(db, current_user, class_id)
    return {"success": True, "message": "Class deleted successfully"}
