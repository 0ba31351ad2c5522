"""
Login identifier validation.
"""

import re

# ASCII local part, '@', ASCII domain part; both sides non-empty
LOGIN_IDENTIFIER_PATTERN = re.compile(
    r"[a-zA-Z0-9_!#$%&'*+/=?`{|}~^.-]+@[a-zA-Z0-9.-]+"
)


def is_valid_login_identifier(value) -> bool:
    """Return True when ``value`` looks like an email address."""
    if not isinstance(value, str):
        return False
    return LOGIN_IDENTIFIER_PATTERN.fullmatch(value) is not None
