import logging
from typing import Optional, List

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from luct.auth.auth_handler import get_password_hash
from luct.models import User, UserRole
from luct.schemas.user_schema import LecturerResponse, RegisterRequest, UserResponse
from luct.utils.errors import Conflict, NotFound, ValidationError, require_fields, store_guard

logger = logging.getLogger(__name__)

ALLOWED_ROLES = {role.value for role in UserRole}


def get_user_by_email(email: str, db: Session) -> Optional[User]:
    statement = select(User).where(User.email == email)
    return db.exec(statement).first()


def create_user(user_req: RegisterRequest, db: Session) -> UserResponse:
    payload = user_req.model_dump()
    require_fields(payload, ("name", "email", "password", "role"), "All fields are required")

    role = user_req.role.strip().lower()
    if role not in ALLOWED_ROLES:
        raise ValidationError("Invalid role selected")

    with store_guard("Registration failed"):
        if get_user_by_email(user_req.email, db):
            raise Conflict("User already exists")

        user = User(
            name=user_req.name,
            email=user_req.email,
            password=get_password_hash(user_req.password),
            role=UserRole(role),
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race against a concurrent registration of the same email
            db.rollback()
            raise Conflict("User already exists")
        db.refresh(user)

    logger.info(f"Registered user {user.user_id} with role {role}")
    return UserResponse.from_user(user)


def get_user(user_id: int, db: Session) -> UserResponse:
    with store_guard("Profile retrieval failed"):
        user = db.get(User, user_id)
    if not user:
        raise NotFound("User not found")
    return UserResponse.from_user(user)


def list_lecturers(db: Session) -> List[LecturerResponse]:
    with store_guard("Failed to fetch lecturers"):
        statement = select(User).where(User.role == UserRole.lecturer)
        users = db.exec(statement).all()
    return [LecturerResponse.model_validate(user, from_attributes=True) for user in users]
