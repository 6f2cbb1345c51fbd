"""
Password Hashing
"""

from werkzeug.security import check_password_hash, generate_password_hash

DEFAULT_HASH_METHOD = 'pbkdf2:sha256:600000'


def hash_password(password, method=DEFAULT_HASH_METHOD):
    return generate_password_hash(password, method=method)


def verify_password(password_hash, password):
    """True when ``password`` matches the stored hash."""
    if not password_hash or not password:
        return False
    return check_password_hash(password_hash, password)
