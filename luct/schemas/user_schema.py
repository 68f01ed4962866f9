from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from luct.models import UserRole, User


class RegisterRequest(BaseModel):
    # Optional so that blank and missing fields share one error message
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class Identity(BaseModel):
    """Claims carried by an access token."""
    id: int
    role: UserRole
    name: str
    email: str


class UserResponse(BaseModel):
    user_id: int
    name: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None

    @staticmethod
    def from_user(user: User | None) -> Optional['UserResponse']:
        if user is None:
            return None
        return UserResponse.model_validate(user.model_dump())


class LecturerResponse(BaseModel):
    user_id: int
    name: str
    email: str
    role: UserRole


class LoginUser(BaseModel):
    id: int
    name: str
    email: str
    role: UserRole


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    token: str
    user: LoginUser


class RegisterResponse(BaseModel):
    success: bool = True
    message: str = "User registered"
    user: UserResponse
