"""Validation for account and health profile fields.

Every validator returns ``(is_valid, error_message)``; the message is empty
when the value is valid.
"""
import re
from typing import Tuple


_EMAIL = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
_SPECIAL = re.compile(r'[!@#$%^&*(),.?":{}|<>_\-+=\[\]\\\/;\'`~]')
# Latin letters plus CJK, for patients registering with a Chinese name
_NAME = re.compile(r"^[a-zA-Z一-鿿\s\-'.]+$")

# Accepted ranges for the health profile, by field
PROFILE_LIMITS = {
    "age": (0, 130),
    "height": (30, 272),
    "weight": (1, 650),
}


def validate_email(email: str) -> Tuple[bool, str]:
    if not email or not email.strip():
        return False, "Email is required"

    email = email.strip().lower()
    if len(email) > 254:  # RFC 5321
        return False, "Email is too long"
    if not _EMAIL.match(email):
        return False, "Invalid email format"

    local_part = email.rsplit('@', 1)[0]
    if len(local_part) > 64:
        return False, "Email local part is too long"
    if '..' in email:
        return False, "Email cannot contain consecutive dots"
    if local_part.startswith('.') or local_part.endswith('.'):
        return False, "Email local part cannot start or end with a dot"

    return True, ""


def validate_password(password: str) -> Tuple[bool, str]:
    """
    Password rules: 8-128 characters with at least one uppercase letter,
    one lowercase letter, one number and one special character.
    """
    if not password:
        return False, "Password is required"
    if len(password) < 8:
        return False, "Password must be at least 8 characters long"
    if len(password) > 128:
        return False, "Password is too long (max 128 characters)"

    checks = (
        (r'[A-Z]', "Password must contain at least one uppercase letter"),
        (r'[a-z]', "Password must contain at least one lowercase letter"),
        (r'\d', "Password must contain at least one number"),
    )
    for pattern, message in checks:
        if not re.search(pattern, password):
            return False, message
    if not _SPECIAL.search(password):
        return False, "Password must contain at least one special character"

    return True, ""


def validate_name(name: str, field_name: str = "Name") -> Tuple[bool, str]:
    if not name or not name.strip():
        return False, f"{field_name} is required"

    name = name.strip()
    if len(name) > 50:
        return False, f"{field_name} is too long (max 50 characters)"
    if not _NAME.match(name):
        return False, f"{field_name} can only contain letters, spaces, hyphens, and apostrophes"

    return True, ""


def passwords_match(password: str, confirm_password: str) -> Tuple[bool, str]:
    if password != confirm_password:
        return False, "Passwords do not match"
    return True, ""


def validate_profile_number(value: str, field_name: str) -> Tuple[bool, str]:
    """
    Validate a health profile number (age in years, height in cm, weight in kg).

    Empty values are allowed: the profile can be completed later.

    Args:
        value: Number as entered
        field_name: One of age, height, weight

    Returns:
        Tuple of (is_valid, error_message)
    """
    value = (value or "").strip()
    if not value:
        return True, ""

    pattern = r'^\d+$' if field_name == "age" else r'^\d+(\.\d+)?$'
    if not re.match(pattern, value):
        return False, f"{field_name.capitalize()} must be a number"

    low, high = PROFILE_LIMITS[field_name]
    if not low <= float(value) <= high:
        return False, f"{field_name.capitalize()} must be between {low} and {high}"

    return True, ""
