"""Signed, time-bounded encoding of session records."""

import warnings
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime, timedelta

import jwt
import pydantic
import structlog

from timeline.core.modules.session.models import TOKEN_VERSION, SessionRecord, TokenClaims
from timeline.utils import now

logger = structlog.get_logger(__name__)

ALGORITHM = "HS256"
TOKEN_LIFETIME = timedelta(days=1)  # Algorithm-level "exp", checked independently of expires_at
MIN_KEY_LENGTH = 32  # SHA-256 digest size; shorter HMAC keys make PyJWT warn on every call


class SessionCodec:
    """Converts session records to and from HS256-signed JWT strings.

    Decoding never raises: a bad signature, a foreign algorithm, a malformed
    token, an unexpected claim shape or an expired session all come back as None.
    """

    def __init__(self, secret: str, clock: Callable[[], datetime] = now) -> None:
        self._key = secret.encode()
        self._clock = clock
        self._short_key = len(self._key) < MIN_KEY_LENGTH

    @contextmanager
    def _key_length_warnings_muted(self) -> Iterator[None]:
        """Silence PyJWT's per-call HMAC key length warning; a short key is reported once at startup."""
        if not self._short_key:
            yield
            return
        with warnings.catch_warnings():
            warnings.filterwarnings("ignore", message="The HMAC key is", category=UserWarning)
            yield

    def encode(self, record: SessionRecord) -> str:
        issued_at = self._clock()
        claims = {
            "v": TOKEN_VERSION,
            **record.model_dump(mode="json"),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + TOKEN_LIFETIME).timestamp()),
        }
        with self._key_length_warnings_muted():
            return jwt.encode(claims, self._key, algorithm=ALGORITHM)

    def decode(self, token: str) -> SessionRecord | None:
        try:
            with self._key_length_warnings_muted():
                payload = jwt.decode(
                    token,
                    self._key,
                    algorithms=[ALGORITHM],
                    options={"require": ["exp", "iat"]},
                )
        except jwt.InvalidTokenError as e:
            logger.debug("session_rejected", reason=type(e).__name__)
            return None

        try:
            claims = TokenClaims.model_validate(payload)
        except pydantic.ValidationError as e:
            logger.debug("session_rejected", reason="invalid_claims", errors=e.error_count())
            return None

        record = claims.to_record()
        if record.is_expired(self._clock()):
            logger.debug("session_rejected", reason="expired", expires_at=record.expires_at.isoformat())
            return None
        return record
