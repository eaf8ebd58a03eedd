from typing import Optional

from fastapi import Depends, Header

from travelgo.errors import UnauthorizedError
from travelgo.services.security import Identity
from travelgo.services.token_service import TokenIssuer, build_token_issuer

NO_TOKEN_MESSAGE = "Access denied. No token provided."

token_issuer = build_token_issuer()


def get_token_issuer() -> TokenIssuer:
    return token_issuer


def get_current_identity(
    authorization: Optional[str] = Header(None),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> Identity:
    """Authorization gate: 401 without a bearer token, 403 when it fails verification."""
    if not authorization:
        raise UnauthorizedError(NO_TOKEN_MESSAGE)
    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise UnauthorizedError(NO_TOKEN_MESSAGE)
    return issuer.verify(token)
