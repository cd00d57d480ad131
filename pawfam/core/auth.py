# pawfam/core/auth.py
import uuid
from functools import lru_cache

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from pawfam.core.config import get_settings
from pawfam.core.errors import ForbiddenError, UnauthorizedError
from pawfam.core.security import TokenIssuer
from pawfam.database import get_session
from pawfam.models.user import User

# HTTP Bearer scheme:
# - auto_error=False => a missing Authorization header does not raise
#   FastAPI's 403; we raise our own 401 instead.
bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Token issuer built once from settings."""
    return TokenIssuer.from_settings(get_settings())


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: Session = Depends(get_session),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> User:
    """
    Resolve the current user from a bearer token.

    Flow:
      1. No Authorization header => 401.
      2. Verify signature + expiry => extract 'sub'.
      3. Load the user; a deleted user is treated as unauthenticated.

    Raises:
        UnauthorizedError(401): missing / invalid / expired token, or the
        referenced user no longer exists.
    """
    if credentials is None:
        raise UnauthorizedError("No token, authorization denied")

    payload = tokens.decode(credentials.credentials)

    try:
        user_id = uuid.UUID(str(payload.get("sub")))
    except ValueError:
        raise UnauthorizedError("Invalid or expired token")

    user = session.get(User, user_id)
    if user is None:
        raise UnauthorizedError("User not found")
    return user


def require_vendor(user: User = Depends(get_current_user)) -> User:
    """
    Enforce vendor role.

    Raises:
        ForbiddenError(403): if the user is not a vendor.
    """
    if user.role != "vendor":
        raise ForbiddenError("Vendor access required")
    return user
