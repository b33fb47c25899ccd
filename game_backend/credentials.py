# credentials.py
"""
Password hashing and verification.

New hashes come from werkzeug and carry their method, cost parameters and
salt in the stored string. Rows written by the earlier bcrypt-based backend
(``$2a$``/``$2b$``/``$2y$`` prefixes) are still verified with bcrypt.
"""

import bcrypt
from werkzeug.security import generate_password_hash, check_password_hash

BCRYPT_PREFIXES = ('$2a$', '$2b$', '$2y$')


def hash_password(password):
    """Hashes the password for storage in UserInfo.PW."""
    return generate_password_hash(password)


def verify_password(password, stored_hash):
    """
    Checks a plaintext password against a stored hash.

    Never raises: an empty, malformed or unsupported stored hash is
    treated as a failed verification.
    """
    if not stored_hash or password is None:
        return False

    if stored_hash.startswith(BCRYPT_PREFIXES):
        try:
            return bcrypt.checkpw(password.encode('utf-8'), stored_hash.encode('utf-8'))
        except ValueError:
            return False

    try:
        return check_password_hash(stored_hash, password)
    except (ValueError, TypeError):
        return False
