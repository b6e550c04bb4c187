import re
from typing import Optional

USERNAME_REGEX = re.compile(r"^[a-zA-Z0-9_.-]{3,64}$")
EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def check_signup_fields(username: str, email: str, password: str) -> Optional[str]:
    """
    Validates signup input before it reaches the backend.
    Returns an error message, or None when everything is acceptable:
    - username with 3 to 64 letters, numbers, '.', '_' or '-'
    - a plausible email address
    - password with at least 8 characters, one letter and one number
    """
    if not USERNAME_REGEX.match(username):
        return "Invalid username. Use only letters, numbers, '.', '_' or '-', with 3 to 64 characters."

    if not EMAIL_REGEX.match(email):
        return "Invalid email address."

    if len(password) < 8:
        return "Password must be at least 8 characters long."

    if not re.search(r"[a-zA-Z]", password) or not re.search(r"\d", password):
        return "Password must contain at least one letter and one number."

    return None
