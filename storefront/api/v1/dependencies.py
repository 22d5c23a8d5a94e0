# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import APIKeyHeader

# Local application imports
from ...application.use_cases.auth.verify_credential import VerifyCredentialUseCase
from ...core.security import AUTH_TOKEN_HEADER
from ...di.container import get_container
from ...domain.models.claims import ADMIN, SELLER, IdentityClaims


# auto_error is off so a missing header becomes MissingCredentialError
token_header_scheme = APIKeyHeader(name=AUTH_TOKEN_HEADER, auto_error=False)


async def get_current_claims(
    token: Optional[str] = Depends(token_header_scheme),
) -> IdentityClaims:
    """
    FastAPI dependency to verify the auth token and expose its claims
    
    Args:
        token: Raw value of the auth header
        
    Returns:
        IdentityClaims for this request
        
    Raises:
        MissingCredentialError: If the header is absent
        InvalidCredentialError: If the token does not verify
    """
    container = get_container()
    verify_credential_use_case = container.get(VerifyCredentialUseCase)
    return await verify_credential_use_case.execute(token)


async def require_seller(
    claims: IdentityClaims = Depends(get_current_claims),
) -> IdentityClaims:
    """Only lets sellers through. Runs after get_current_claims."""
    return claims.require(SELLER, "You aren't a seller")


async def require_admin(
    claims: IdentityClaims = Depends(get_current_claims),
) -> IdentityClaims:
    """Only lets admins through. Runs after get_current_claims."""
    return claims.require(ADMIN, "Authorization denied, only Admins")
