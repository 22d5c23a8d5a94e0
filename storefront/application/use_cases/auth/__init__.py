from .verify_credential import VerifyCredentialUseCase

__all__ = ["VerifyCredentialUseCase"]
