# Standard library imports
import logging
import time
from typing import Any, Dict

# External package imports
import jwt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings
from .exceptions import InvalidCredentialError

logger = logging.getLogger(__name__)


# Request header carrying the opaque bearer credential
AUTH_TOKEN_HEADER = "x-auth-token"


def sign_credential(claims: Dict[str, Any]) -> str:
    """
    Sign a credential the way the identity service does.

    The catalog only verifies credentials; this is used by tooling and tests.
    """
    settings = get_settings()
    issued_at = int(time.time())
    return jwt.encode(
        {
            **claims,
            "iat": issued_at,
            "exp": issued_at + settings.access_token_expire_minutes * 60,
        },
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def read_credential(token: str) -> Dict[str, Any]:
    """
    Verify a credential's signature and expiry and return its claims

    Raises:
        InvalidCredentialError: Bad signature, malformed token or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except InvalidTokenError as e:
        logger.debug(f"Rejected credential: {e}")
        raise InvalidCredentialError("Token isn't valid") from e
