from .config import Settings, get_settings
from .security import (
    AUTH_TOKEN_HEADER,
    sign_credential,
    read_credential,
)

__all__ = [
    "Settings",
    "get_settings",
    "AUTH_TOKEN_HEADER",
    "sign_credential",
    "read_credential",
]
