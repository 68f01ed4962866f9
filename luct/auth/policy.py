"""Role and ownership rules for the protected operations.

Each operation names the roles that are always allowed and whether the owner
of the resource is allowed as well. Routes and services never compare roles
inline; they go through :func:`authorize` or :func:`owner_scoped`.
"""
import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, Optional

from fastapi import Depends

from luct.auth.auth_handler import get_current_user
from luct.models import UserRole
from luct.schemas.user_schema import Identity
from luct.utils.errors import Forbidden

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Policy:
    roles: FrozenSet[UserRole]
    owner_allowed: bool = False
    message: str = "Not authorized"


POLICIES = {
    "class.create": Policy(
        roles=frozenset({UserRole.lecturer, UserRole.prl, UserRole.pl}),
        message="Not authorized to create class",
    ),
    "class.update": Policy(
        roles=frozenset({UserRole.pl}),
        owner_allowed=True,
        message="Not authorized to edit this class",
    ),
    "class.delete": Policy(
        roles=frozenset({UserRole.pl}),
        owner_allowed=True,
        message="Not authorized to delete this class",
    ),
    # Lecturers only see the classes they teach in the dropdown
    "class.options": Policy(
        roles=frozenset({UserRole.student, UserRole.prl, UserRole.pl}),
        owner_allowed=True,
    ),
    "report.view": Policy(
        roles=frozenset({UserRole.student, UserRole.prl, UserRole.pl}),
        owner_allowed=True,
        message="Not authorized to view this report",
    ),
    "report.feedback": Policy(
        roles=frozenset({UserRole.prl}),
        message="Not authorized to update reports",
    ),
}


def is_allowed(identity: Identity, operation: str, owner_id: Optional[int] = None) -> bool:
    policy = POLICIES[operation]
    if identity.role in policy.roles:
        return True
    return policy.owner_allowed and owner_id is not None and owner_id == identity.id


def authorize(identity: Identity, operation: str, owner_id: Optional[int] = None) -> None:
    if not is_allowed(identity, operation, owner_id):
        logger.warning(f"Denied {operation} for user {identity.id} ({identity.role.value})")
        raise Forbidden(POLICIES[operation].message)


def owner_scoped(identity: Identity, operation: str) -> bool:
    """True when the caller may only reach the resources they own."""
    policy = POLICIES[operation]
    return identity.role not in policy.roles and policy.owner_allowed


def require(operation: str) -> Callable[..., Identity]:
    """Route dependency enforcing a role-only policy."""

    def dependency(current_user: Identity = Depends(get_current_user)) -> Identity:
        authorize(current_user, operation)
        return current_user

    return dependency
