import logging

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auraboard import config
from auraboard.errors import UnauthorizedError
from auraboard.schemas.session import SessionUser

logger = logging.getLogger(__name__)

bearer = HTTPBearer(auto_error=False)


def decode_session_token(token: str) -> SessionUser:
    """Verify a session token and return the identity it carries."""
    if not config.AUTH_SECRET:
        logger.error("AUTH_SECRET is not set; rejecting session token")
        raise UnauthorizedError("no AUTH_SECRET configured")
    try:
        payload = jwt.decode(token, config.AUTH_SECRET, algorithms=[config.AUTH_ALGORITHM])
    except jwt.PyJWTError as e:
        raise UnauthorizedError(f"invalid session token: {e}") from e

    email = payload.get("email")
    if not email or not isinstance(email, str):
        raise UnauthorizedError("session token has no email claim")
    return SessionUser(email=email, name=payload.get("name") or "")


def issue_session_token(email: str, name: str = "", **claims) -> str:
    # Normally the identity provider signs these; used by local tooling and tests.
    payload = {"email": email, "name": name, **claims}
    return jwt.encode(payload, config.AUTH_SECRET, algorithm=config.AUTH_ALGORITHM)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> SessionUser:
    if credentials is None:
        raise UnauthorizedError("missing bearer token")
    return decode_session_token(credentials.credentials)
