# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional

# Local application imports
from ...core.exceptions import ForbiddenError


SELLER = "seller"
ADMIN = "admin"

# Legacy boolean claims still issued by the identity service
_LEGACY_FLAG_CLAIMS = {
    "isSeller": SELLER,
    "isAdmin": ADMIN,
}


@dataclass(frozen=True)
class IdentityClaims:
    """
    Decoded identity for one request.
    
    Roles are a set of named capabilities, so new roles need no new fields.
    Built fresh from every verified token and never persisted.
    """
    user_id: Optional[str]
    capabilities: FrozenSet[str] = field(default_factory=frozenset)
    
    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "IdentityClaims":
        """
        Build claims from a decoded token payload
        
        Capabilities come from the `roles` list claim plus the legacy
        `isSeller` / `isAdmin` boolean claims.
        """
        capabilities = {str(role).lower() for role in payload.get("roles") or []}
        for claim, capability in _LEGACY_FLAG_CLAIMS.items():
            if payload.get(claim):
                capabilities.add(capability)
        
        user_id = payload.get("sub") or payload.get("id")
        return cls(
            user_id=str(user_id) if user_id is not None else None,
            capabilities=frozenset(capabilities),
        )
    
    def has(self, capability: str) -> bool:
        return capability in self.capabilities
    
    def require(self, capability: str, message: str) -> "IdentityClaims":
        """Return self when the capability is held, else raise ForbiddenError"""
        if not self.has(capability):
            raise ForbiddenError(message)
        return self
