from datetime import datetime, timedelta, UTC
from functools import lru_cache
from typing import Optional

from jose import JWTError, jwt

from luct.configs import settings
from luct.models import User
from luct.schemas.user_schema import Identity
from luct.utils.errors import InvalidCredential


class TokenService:
    """Issues and verifies the signed, time-limited identity tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", lifetime: timedelta = timedelta(hours=24)):
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    def issue(self, user: User, issued_at: Optional[datetime] = None) -> str:
        issued_at = issued_at or datetime.now(UTC)
        to_encode = {
            "id": user.user_id,
            "role": user.role.value if hasattr(user.role, "value") else user.role,
            "name": user.name,
            "email": user.email,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
            return Identity.model_validate({
                "id": payload.get("id"),
                "role": payload.get("role"),
                "name": payload.get("name"),
                "email": payload.get("email"),
            })
        except (JWTError, ValueError):
            raise InvalidCredential()


@lru_cache
def get_token_service() -> TokenService:
    return TokenService(
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        lifetime=timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS),
    )
