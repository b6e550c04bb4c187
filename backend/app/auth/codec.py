from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from jose import JWTError, jwt

from ..core.errors import TokenError
from ..core.logging import get_logger
from ..models.AuthToken import IdentityClaims

logger = get_logger("auth.codec")

ALGORITHM = "HS256"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenCodec:
    """
    Encodes identity claims into HS256-signed JWTs and verifies them back.

    Timestamps are whole seconds, so the expiry inside a token can be stored
    next to it without drift. Verification has no clock-skew leeway: a token
    is dead from the second its "exp" is reached.
    """

    def __init__(self, key: bytes, clock: Clock = utc_now):
        self._key = key
        self._clock = clock

    def now(self) -> datetime:
        return self._clock().astimezone(timezone.utc).replace(microsecond=0)

    @staticmethod
    def expiry(issued_at: datetime, ttl: timedelta) -> datetime:
        return issued_at + timedelta(seconds=int(ttl.total_seconds()))

    def encode(self, claims: IdentityClaims, ttl: timedelta, issued_at: Optional[datetime] = None) -> str:
        if issued_at is None:
            issued_at = self.now()
        expires_at = self.expiry(issued_at, ttl)

        to_encode = {
            "sub": str(claims.user_id),
            "email": claims.email,
            "name": claims.name,
            "signup_id": claims.signup_id,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(to_encode, self._key, algorithm=ALGORITHM)

    def decode_and_verify(self, token: str) -> Optional[IdentityClaims]:
        """
        Returns the claims of a genuine, unexpired token and None otherwise.
        Malformed, forged and expired tokens all look the same to the caller.
        """
        try:
            return self._verify(token)
        except TokenError as e:
            logger.debug("token_rejected", reason=str(e))
            return None

    def _verify(self, token: str) -> IdentityClaims:
        try:
            # Expiry is checked below against the injected clock, with zero leeway.
            # No "require_exp" here: jose turns it back into a wall-clock exp check.
            payload = jwt.decode(
                token,
                self._key,
                algorithms=[ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_aud": False,
                    "verify_iss": False,
                    "require_iat": True,
                    "require_sub": True,
                },
            )
        except JWTError as e:
            raise TokenError(f"verification failed: {e}") from e

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)):
            raise TokenError("exp claim is not numeric")
        if exp <= self._clock().timestamp():
            raise TokenError("token expired")

        try:
            return IdentityClaims(
                user_id=int(payload["sub"]),
                email=payload["email"],
                name=payload["name"],
                signup_id=payload.get("signup_id"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise TokenError(f"invalid claims: {e}") from e
