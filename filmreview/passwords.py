# filmreview/passwords.py
import bcrypt
from werkzeug.security import generate_password_hash, check_password_hash

# digests written by the earlier bcrypt-based deployment
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(plaintext, method="scrypt"):
    """Salted adaptive digest; a fresh salt is drawn on every call."""
    return generate_password_hash(plaintext, method=method)


def verify_password(digest, plaintext):
    """Check plaintext against a stored digest.

    Werkzeug digests are the default; legacy bcrypt digests are still
    accepted so accounts created before the switch can log in. Both paths
    compare in constant time. A malformed digest never verifies.
    """
    if not digest:
        return False

    if digest.startswith(BCRYPT_PREFIXES):
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
        except ValueError:
            return False

    try:
        return check_password_hash(digest, plaintext)
    except ValueError:
        return False
