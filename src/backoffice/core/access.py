"""Owner-or-admin access policy.

This is the single authorization primitive used wherever a per-record check
happens. Access is all-or-nothing per record: there are no field-level
permissions.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TypeVar

from .exceptions import AuthorizationError, NotFoundError

T = TypeVar("T")


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


class Action(str, Enum):
    READ = "read"
    EDIT = "edit"
    DELETE = "delete"


@dataclass(frozen=True)
class Actor:
    """The authenticated identity attached to a request."""

    id: int
    username: str
    role: Role


def can_access(actor: Actor, record_owner_id: Optional[int], action: Action) -> bool:
    """Decide whether `actor` may perform `action` on a record owned by `record_owner_id`.

    Admins may do anything; users only act on records they own. The same rule
    applies to every action.
    """
    if actor.role is Role.ADMIN:
        return True
    if actor.role is Role.USER:
        return record_owner_id is not None and actor.id == record_owner_id
    raise ValueError(f"Unhandled role: {actor.role!r}")


def authorize(
    actor: Actor,
    record: Optional[T],
    action: Action,
    *,
    owner_attr: Optional[str] = "user_id",
    label: str = "Record",
) -> T:
    """Apply the existence check, then the access check, and return the record.

    The order matters to clients: a missing record is reported as 404 even to
    actors who could never have accessed it.
    """
    if record is None:
        raise NotFoundError(f"{label} not found.")
    owner_id = getattr(record, owner_attr) if owner_attr else None
    if not can_access(actor, owner_id, action):
        raise AuthorizationError(f"You are not allowed to {action.value} this {label.lower()}.")
    return record
