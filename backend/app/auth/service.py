from datetime import timedelta
from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import Session

from ..core.database import engine, get_session
from ..core.keys import get_signing_key_provider
from ..core.logging import get_logger
from ..core.settings import settings
from ..models.AuthToken import IdentityClaims, TokenRecord
from ..models.User import User
from ..users.service import find_user_by_id
from .codec import TokenCodec
from .store import TokenStore

logger = get_logger("auth.service")

# OAuth2 scheme (for extracting token from header)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


class AuthService:
    """
    Issues, validates and revokes session tokens.

    A token is accepted only if the codec verifies it (signature, expiry) AND
    the store has a matching, unrevoked record. Holds no per-request state.
    """

    def __init__(self, codec: TokenCodec, store: TokenStore, ttl: timedelta = timedelta(hours=1)):
        self.codec = codec
        self.store = store
        self.ttl = ttl

    def issue(self, user: User) -> str:
        claims = IdentityClaims(
            user_id=user.id,
            email=user.email,
            name=user.username,
            signup_id=user.id,
        )
        issued_at = self.codec.now()
        token = self.codec.encode(claims, self.ttl, issued_at=issued_at)

        record = TokenRecord(
            value=token,
            owner_id=user.id,
            issued_at=issued_at,
            expires_at=self.codec.expiry(issued_at, self.ttl),
        )
        # StorageError propagates: an unpersisted token could never be revoked.
        self.store.save(record)
        logger.info("token_issued", owner_id=user.id, expires_at=record.expires_at.isoformat())
        return token

    def authenticate(self, token: str) -> Optional[IdentityClaims]:
        claims = self.codec.decode_and_verify(token)
        if claims is None:
            return None
        if self.store.is_revoked(token):
            logger.debug("token_rejected", reason="revoked or unknown", owner_id=claims.user_id)
            return None
        return claims

    def validate(self, token: str) -> bool:
        return self.authenticate(token) is not None

    def revoke(self, token: str) -> None:
        # No structural check first: malformed or expired tokens can be revoked too.
        self.store.revoke(token)


@lru_cache
def get_auth_service() -> AuthService:
    key = get_signing_key_provider().resolve()
    return AuthService(
        codec=TokenCodec(key),
        store=TokenStore(engine),
        ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )


def get_current_claims(
    token: Annotated[str, Depends(oauth2_scheme)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> IdentityClaims:
    claims = auth.authenticate(token)
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return claims


def get_current_user(
    claims: Annotated[IdentityClaims, Depends(get_current_claims)],
    session: Session = Depends(get_session),
) -> User:
    user = find_user_by_id(session, claims.user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
