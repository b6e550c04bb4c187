import json
from functools import lru_cache
from typing import Optional

from .errors import ConfigurationError
from .logging import get_logger
from .settings import settings

logger = get_logger("core.keys")


class SigningKeyProvider:
    """
    Owns the HMAC secret used to sign and verify session tokens.

    The secret comes from one place (the settings object) and is resolved once;
    every later call returns the same bytes.
    """

    def __init__(self, secret: Optional[str]):
        self._secret = secret
        self._key: Optional[bytes] = None

    def resolve(self) -> bytes:
        if self._key is None:
            if not self._secret:
                logger.error("signing_key_missing")
                raise ConfigurationError("JWT_SECRET_KEY is not configured.")
            if _is_json(self._secret):
                # jose json-decodes str/bytes keys on verify but not on sign.
                logger.error("signing_key_rejected", reason="json-parsable")
                raise ConfigurationError("JWT_SECRET_KEY must not be a JSON value (number, quoted string, object, ...).")
            self._key = self._secret.encode("utf-8")
        return self._key


def _is_json(value: str) -> bool:
    try:
        json.loads(value)
    except ValueError:
        return False
    return True


@lru_cache
def get_signing_key_provider() -> SigningKeyProvider:
    return SigningKeyProvider(settings.JWT_SECRET_KEY)
