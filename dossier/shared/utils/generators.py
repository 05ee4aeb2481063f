"""ID and value generators (CUID for row ids, ULID for attachment filenames, passwords)."""

import os
import secrets
import string

from cuid2 import cuid_wrapper
from ulid import ULID

cuid_generator = cuid_wrapper()

PASSWORD_LENGTH = 12
PASSWORD_ALPHABET = string.ascii_letters + string.digits + "!@#$%^&*()_+~"


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_attachment_filename(original_filename: str) -> str:
    """Return a unique, lexicographically sortable blob filename.

    The ULID carries the upload timestamp, so filenames sort in upload order.
    The original extension (lower-cased) is kept.

    Args:
        original_filename: Name of the file as uploaded by the client.

    Returns:
        ``<ULID><ext>``, e.g. ``01HV5J1Z8Q7K3T3QH2V4W5X6Y7.pdf``.
    """
    _, ext = os.path.splitext(os.path.basename(original_filename or ""))
    return f"{ULID()}{ext.lower()}"


def generate_strong_password(length: int = PASSWORD_LENGTH) -> str:
    """Return a random password drawn from letters, digits and symbols."""
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))
