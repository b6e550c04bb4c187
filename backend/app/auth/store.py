from typing import Optional

from sqlalchemy import update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from ..core.errors import StorageError
from ..core.logging import get_logger
from ..models.AuthToken import TokenRecord

logger = get_logger("auth.store")


class TokenStore:
    """
    Durable record of issued tokens and their revocation flag.

    Every call runs in its own short transaction against the shared engine,
    so one instance serves all concurrent requests.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def save(self, record: TokenRecord) -> None:
        """
        Insert-or-ignore on the token value. Encoding is deterministic per second,
        so a second issue for the same user within one second yields the same
        value; the existing row is kept as is and its revoked flag is never reset.
        """
        try:
            with Session(self.engine, expire_on_commit=False) as session:
                existing = session.get(TokenRecord, record.value)
                if existing is None:
                    session.add(record)
                    session.commit()
                    return
            self._check_same_owner(existing, record)
        except IntegrityError as e:
            # Lost an insert race against an identical token.
            existing = self.get(record.value)
            if existing is None:
                logger.error("token_save_failed", owner_id=record.owner_id, error=str(e))
                raise StorageError("Could not persist issued token") from e
            self._check_same_owner(existing, record)
        except SQLAlchemyError as e:
            logger.error("token_save_failed", owner_id=record.owner_id, error=str(e))
            raise StorageError("Could not persist issued token") from e

    @staticmethod
    def _check_same_owner(existing: TokenRecord, record: TokenRecord) -> None:
        if existing.owner_id != record.owner_id:
            logger.error("token_owner_conflict", owner_id=record.owner_id)
            raise StorageError("Token value already recorded for another owner")
        logger.debug("token_already_recorded", owner_id=record.owner_id, revoked=existing.revoked)

    def get(self, token: str) -> Optional[TokenRecord]:
        try:
            with Session(self.engine, expire_on_commit=False) as session:
                return session.get(TokenRecord, token)
        except SQLAlchemyError as e:
            logger.error("token_lookup_failed", error=str(e))
            raise StorageError("Could not read token record") from e

    def is_revoked(self, token: str) -> bool:
        # A token we never issued is treated exactly like a revoked one.
        record = self.get(token)
        return record is None or record.revoked

    def revoke(self, token: str) -> None:
        # Single UPDATE, no existence check: unknown or already revoked tokens are a no-op.
        statement = update(TokenRecord).where(TokenRecord.value == token).values(revoked=True)
        try:
            with self.engine.begin() as conn:
                matched = conn.execute(statement).rowcount > 0
        except SQLAlchemyError as e:
            logger.error("token_revoke_failed", error=str(e))
            raise StorageError("Could not revoke token") from e
        logger.info("token_revoked", matched=matched)
