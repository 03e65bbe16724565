import re

import email_validator


USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_.-]{3,32}")


def validate_username(username: str) -> str:
    if not USERNAME_PATTERN.fullmatch(username):
        raise ValueError(
            "Username must be 3-32 characters long and contain only letters, "
            "digits, '_', '.' or '-'."
        )
    return username


def validate_password_strength(password: str) -> str:
    if len(password) < 8:
        raise ValueError("Password must contain at least 8 characters.")
    if not re.search(r"[A-Z]", password):
        raise ValueError("Password must contain at least one uppercase letter.")
    if not re.search(r"[a-z]", password):
        raise ValueError("Password must contain at least one lower letter.")
    if not re.search(r"\d", password):
        raise ValueError("Password must contain at least one digit.")
    if not re.search(r"[@$!%*?&#^_\-.,:;+=~]", password):
        raise ValueError(
            "Password must contain at least one special character: "
            "@, $, !, %, *, ?, &, #, ^, _, -, ., ,, :, ;, +, =, ~."
        )
    return password


def validate_email(user_email: str) -> str:
    try:
        email_info = email_validator.validate_email(
            user_email, check_deliverability=False
        )
    except email_validator.EmailNotValidError as error:
        raise ValueError(str(error))
    return email_info.normalized.lower()
