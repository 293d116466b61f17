"""Password hashing and bearer token handling."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

import bcrypt
import jwt
from jwt.exceptions import InvalidTokenError

from scale_down.errors import UnauthorizedError

_ALGORITHM = "HS256"
SECONDS_PER_DAY = 24 * 60 * 60


def hash_password(password: str) -> str:
    """Return a bcrypt hash for a plain password."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


@dataclass(frozen=True)
class AccessToken:
    """Issued bearer token."""

    token: str
    token_type: str
    expires_in: int


@dataclass
class TokenService:
    """Issues and verifies signed tokens carrying a user id."""

    secret: str
    ttl_days: int = 30

    def issue(self, user_id: UUID) -> AccessToken:
        """Create a token for the user."""
        now = datetime.now(tz=UTC)
        expires_in = self.ttl_days * SECONDS_PER_DAY
        payload = {
            "user": str(user_id),
            "iat": now,
            "exp": now + timedelta(seconds=expires_in),
        }
        token = jwt.encode(payload, self.secret, algorithm=_ALGORITHM)
        return AccessToken(token=token, token_type="Bearer", expires_in=expires_in)

    def verify(self, token: str) -> UUID:
        """Return the user id from a valid token."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[_ALGORITHM])
            return UUID(str(payload["user"]))
        except (InvalidTokenError, KeyError, ValueError) as exc:
            raise UnauthorizedError from exc
