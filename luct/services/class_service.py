import logging
from typing import List

from sqlmodel import Session, select

from luct.auth.policy import authorize, owner_scoped
from luct.models import Class
from luct.schemas.class_schema import ClassCreateRequest, ClassUpdateRequest
from luct.schemas.user_schema import Identity
from luct.utils.errors import NotFound, ValidationError, missing_fields, require_fields, store_guard

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("class_name", "course_name", "course_code", "lecturer")


def list_all(db: Session) -> List[Class]:
    with store_guard("Failed to fetch classes"):
        statement = select(Class).order_by(Class.created_at.desc(), Class.id.desc())
        return db.exec(statement).all()


def list_options(db: Session, caller: Identity) -> List[Class]:
    statement = select(Class).order_by(Class.class_name)
    if owner_scoped(caller, "class.options"):
        # Loose match on the free-text lecturer column, two lecturers whose
        # names overlap see each other's classes
        statement = statement.where(
            Class.lecturer.icontains(caller.name, autoescape=True)
        )
    with store_guard("Failed to fetch classes"):
        return db.exec(statement).all()


def _get_existing(db: Session, class_id: int) -> Class:
    with store_guard("Failed to fetch class"):
        lecture_class = db.get(Class, class_id)
    if not lecture_class:
        raise NotFound("Class not found")
    return lecture_class


def create_class(db: Session, caller: Identity, class_req: ClassCreateRequest) -> Class:
    require_fields(class_req.model_dump(), REQUIRED_FIELDS, "Required fields missing")
    authorize(caller, "class.create")

    lecture_class = Class(
        class_name=class_req.class_name,
        course_name=class_req.course_name,
        course_code=class_req.course_code,
        lecturer=class_req.lecturer,
        schedule=class_req.schedule or None,
        venue=class_req.venue or None,
        capacity=class_req.capacity,
        status=class_req.status or "active",
        created_by=caller.name,
        created_by_id=caller.id,
    )
    with store_guard("Failed to add class"):
        db.add(lecture_class)
        db.commit()
        db.refresh(lecture_class)
    logger.info(f"Class {lecture_class.id} created by user {caller.id}")
    return lecture_class


def update_class(db: Session, caller: Identity, class_id: int, patch: ClassUpdateRequest) -> Class:
    lecture_class = _get_existing(db, class_id)
    authorize(caller, "class.update", owner_id=lecture_class.created_by_id)

    changes = patch.model_dump(exclude_unset=True)
    non_nullable = REQUIRED_FIELDS + ("status",)
    blanked = missing_fields(changes, [name for name in non_nullable if name in changes])
    if blanked:
        raise ValidationError(f"Fields cannot be empty: {', '.join(blanked)}")
    for name in ("schedule", "venue"):
        if name in changes:
            changes[name] = changes[name] or None

    for key, value in changes.items():
        setattr(lecture_class, key, value)
    with store_guard("Failed to update class"):
        db.add(lecture_class)
        db.commit()
        db.refresh(lecture_class)
    return lecture_class


def delete_class(db: Session, caller: Identity, class_id: int) -> None:
    lecture_class = _get_existing(db, class_id)
    authorize(caller, "class.delete", owner_id=lecture_class.created_by_id)

    with store_guard("Failed to delete class"):
        db.delete(lecture_class)
        db.commit()
    logger.info(f"Class {class_id} deleted by user {caller.id}")
