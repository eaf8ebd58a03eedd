from dataclasses import dataclass

import bcrypt

from travelgo.config import settings


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as resolved from a verified token."""

    id: int
    username: str
    email: str


def hash_password(password: str, rounds: int = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or over-long input
        return False


def owns_resource(identity: Identity, resource) -> bool:
    """True when the resource exists and its ``user_id`` is the caller's id."""
    return resource is not None and resource.user_id == identity.id
