# pawfam/core/otp.py
import secrets
import string

OTP_ALPHABET = string.ascii_uppercase + string.digits
OTP_LENGTH = 6

_BASE36 = string.digits + string.ascii_lowercase


def generate_otp(length: int = OTP_LENGTH) -> str:
    """Random reset code drawn from A-Z0-9."""
    return "".join(secrets.choice(OTP_ALPHABET) for _ in range(length))


def generate_temporary_password() -> str:
    """
    System-issued password sent at the end of recovery.

    16 characters: 8 lower-case base-36 followed by 8 upper-case base-36.
    """
    head = "".join(secrets.choice(_BASE36) for _ in range(8))
    tail = "".join(secrets.choice(_BASE36) for _ in range(8)).upper()
    return head + tail


def codes_match(expected: str, submitted: str) -> bool:
    """Case-insensitive, constant-time comparison of two reset codes."""
    return secrets.compare_digest(expected.upper().encode(), submitted.upper().encode())
