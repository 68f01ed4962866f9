import logging

from fastapi import Depends, APIRouter, status
from sqlmodel import Session

from luct.auth.auth_handler import authenticate_user, get_current_user
from luct.auth.token_service import TokenService, get_token_service
from luct.configs.database import get_db
from luct.schemas.user_schema import (
    Identity, LoginRequest, LoginResponse, LoginUser, RegisterRequest, RegisterResponse, UserResponse,
)
from luct.services import user_service
from luct.utils.errors import InvalidCredential, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(user_req: RegisterRequest, db: Session = Depends(get_db)):
    user = user_service.create_user(user_req, db)
    return RegisterResponse(user=user)


@router.post("/login", response_model=LoginResponse)
def login(
    login_req: LoginRequest,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    if not login_req.email or not login_req.password:
        raise ValidationError("Email and password required")
    user = authenticate_user(db, login_req.email, login_req.password)
    if not user:
        # Same answer for unknown email and wrong password
        logger.info("Rejected login attempt")
        raise InvalidCredential("Invalid credentials", status_code=status.HTTP_401_UNAUTHORIZED)
    return LoginResponse(
        token=tokens.issue(user),
        user=LoginUser(id=user.user_id, name=user.name, email=user.email, role=user.role),
    )


@router.get("/profile", response_model=UserResponse)
def profile(current_user: Identity = Depends(get_current_user), db: Session = Depends(get_db)):
    return user_service.get_user(current_user.id, db)
