from dossier.infrastructure.security.jwt import create_access_token, verify_token
from dossier.infrastructure.security.password import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher", "create_access_token", "verify_token"]
