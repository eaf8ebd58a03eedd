import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from travelgo.config import settings
from travelgo.errors import InvalidTokenError
from travelgo.services.security import Identity

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ("id", "username", "email")


class TokenIssuer:
    """Issues and verifies signed, time-limited bearer tokens.

    Tokens are stateless: nothing is stored server-side, so a token stays
    valid until ``exp`` even after logout or a password change.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", lifetime: timedelta = timedelta(hours=24)):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    def issue(self, user, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected token: {e}")
            raise InvalidTokenError("Invalid token") from e

        missing = [c for c in REQUIRED_CLAIMS if c not in claims]
        if missing:
            raise InvalidTokenError("Invalid token")
        return Identity(id=claims["id"], username=claims["username"], email=claims["email"])


def build_token_issuer() -> TokenIssuer:
    return TokenIssuer(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        lifetime=timedelta(hours=settings.JWT_EXPIRES_HOURS),
    )
