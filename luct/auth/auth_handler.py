from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from passlib.context import CryptContext
from sqlmodel import Session, select

from luct.auth.token_service import TokenService, get_token_service
from luct.models import User
from luct.schemas.user_schema import Identity
from luct.utils.errors import Unauthenticated, store_guard

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)

# auto_error=False: a missing header is answered with our own 401 body
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)

def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password)

def authenticate_user(db_session: Session, email: str, password: str) -> Optional[User]:
    with store_guard("Login failed"):
        statement = select(User).where(User.email == email)
        result = db_session.exec(statement).first()
    if not result or not verify_password(password, result.password):
        return None
    return result

def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """Authorization gate: resolves the bearer token into the caller's identity."""
    if not token:
        raise Unauthenticated()
    return tokens.verify(token)
