# Standard library imports
from typing import Optional

# Local application imports
from ....core.exceptions import MissingCredentialError
from ....core.security import read_credential
from ....domain.models.claims import IdentityClaims


class VerifyCredentialUseCase:
    """Use case for turning a raw auth token into the request's claim set"""
    
    async def execute(self, token: Optional[str]) -> IdentityClaims:
        """
        Verify a token and extract its claims
        
        Args:
            token: Raw value of the auth header, None when the header is absent
            
        Returns:
            IdentityClaims decoded from the token
            
        Raises:
            MissingCredentialError: If no token was sent
            InvalidCredentialError: If the token is malformed, tampered with or expired
        """
        if not token or not token.strip():
            raise MissingCredentialError("Authorization denied, please login")
        
        return IdentityClaims.from_payload(read_credential(token.strip()))
