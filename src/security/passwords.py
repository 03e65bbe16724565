from werkzeug.security import generate_password_hash, check_password_hash


def hash_password(password: str) -> str:
    """
    Hash a plain-text password with salted PBKDF2-SHA256.

    :param password: The plain-text password.
    :return: The hash string, including method and salt.
    """
    return generate_password_hash(password, method="pbkdf2:sha256")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a plain-text password against a stored hash.

    :param plain_password: The password supplied by the user.
    :param hashed_password: The stored hash.
    :return: True if the password matches.
    """
    return check_password_hash(hashed_password, plain_password)
