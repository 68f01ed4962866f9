from datetime import datetime, UTC
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

class UserRole(str, Enum):
    student = "student"
    lecturer = "lecturer"
    prl = "prl"  # Principal Reporting Lecturer
    pl = "pl"  # Program Leader


class User(SQLModel, table=True):
    """User model represents a registered account of the reporting system."""
    __tablename__ = "users"
    user_id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(unique=True, index=True)
    password: str = Field(exclude=True)
    role: UserRole = Field(default=UserRole.student)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
