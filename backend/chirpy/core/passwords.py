"""Password hashing built on Werkzeug's salted key-derivation helpers.

Hashes are self-describing strings (``scrypt:<params>$<salt>$<digest>``), so
the parameters travel with each stored value and can be raised later without
invalidating existing rows.
"""

from __future__ import annotations

from typing import Final

from werkzeug.security import check_password_hash, generate_password_hash

# Memory-hard KDF; Werkzeug draws a fresh random salt on every call.
HASH_METHOD: Final[str] = "scrypt"
SALT_LENGTH: Final[int] = 16


def hash_password(plaintext: str) -> str:
    """
    Derive a salted hash for ``plaintext``.

    :param plaintext: Password as typed by the user.
    :type plaintext: str
    :returns: Encoded hash suitable for storage.
    :rtype: str
    :raises ValueError: If ``plaintext`` is not a string.
    """
    if not isinstance(plaintext, str):
        raise ValueError("Password must be a string.")
    return generate_password_hash(plaintext, method=HASH_METHOD, salt_length=SALT_LENGTH)


def verify_password(plaintext: str, hashed: str) -> bool:
    """
    Check ``plaintext`` against a stored hash in constant time.

    :param plaintext: Candidate password.
    :type plaintext: str
    :param hashed: Value previously returned by :func:`hash_password`.
    :type hashed: str
    :returns: ``True`` on match; ``False`` on mismatch or when ``hashed`` is
        not a recognisable hash string.
    :rtype: bool
    """
    if not isinstance(plaintext, str) or not isinstance(hashed, str) or "$" not in hashed:
        return False
    try:
        return bool(check_password_hash(hashed, plaintext))
    except (ValueError, TypeError, OverflowError):
        # Unknown method or corrupt parameters in the stored string
        return False
