from typing import TYPE_CHECKING
from ...application.use_cases.auth.verify_credential import VerifyCredentialUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            VerifyCredentialUseCase,
            lambda: VerifyCredentialUseCase()
        )
