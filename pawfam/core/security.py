# pawfam/core/security.py
"""
Password hashing and session token issuance.

Session tokens are HS256 JWTs carrying the user id (`sub`) and role.
They are stateless: there is no revocation list, a token stays valid
until `exp`.
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from pawfam.core.config import Settings
from pawfam.core.errors import UnauthorizedError

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(plain: str) -> str:
    """Hash a plain text password (salted argon2)."""
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Return True if `plain` matches the stored hash."""
    return pwd_context.verify(plain, hashed)


def dummy_verify() -> None:
    """Spend the same time as a real verify when there is no hash to check."""
    pwd_context.dummy_verify()


class TokenIssuer:
    """
    Signs and verifies session tokens.

    Built from explicit settings rather than reading the environment,
    so tests can construct one with a known secret and lifetime.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", lifetime: timedelta = timedelta(days=7)):
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALG,
            lifetime=timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
        )

    def issue(self, user_id: uuid.UUID, role: str, now: datetime | None = None) -> str:
        """
        Create a signed token for a user.

        Payload:
          - sub: user id (string)
          - role: customer | vendor
          - iat / exp: issued-at and expiry (UTC)
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "role": role,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """
        Verify signature and expiry and return the claims.

        Raises:
            UnauthorizedError: if the token is invalid or expired.
        """
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError:
            raise UnauthorizedError("Invalid or expired token")
