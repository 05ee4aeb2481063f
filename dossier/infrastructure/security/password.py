"""Password hashing (bcrypt with SHA-256 pre-hash).

Bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a
fixed-length input so long generated passwords are hashed in full.
"""

import base64
import hashlib

import bcrypt


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


class BcryptPasswordHasher:
    """IPasswordHasher implementation."""

    def hash(self, password: str) -> str:
        """Return bcrypt hash of password (SHA-256 pre-hashed before bcrypt)."""
        return bcrypt.hashpw(_prehash(password), bcrypt.gensalt()).decode("utf-8")

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Return True if plain_password matches hashed_password."""
        try:
            return bool(
                bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8"))
            )
        except (ValueError, TypeError):
            return False
