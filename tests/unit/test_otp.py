import string

from pawfam.core.otp import (
    OTP_ALPHABET,
    codes_match,
    generate_otp,
    generate_temporary_password,
)


def test_alphabet_is_uppercase_alphanumeric():
    assert OTP_ALPHABET == string.ascii_uppercase + string.digits
    assert len(OTP_ALPHABET) == 36


def test_generated_codes_are_six_symbols_from_alphabet():
    for _ in range(200):
        code = generate_otp()
        assert len(code) == 6
        assert set(code) <= set(OTP_ALPHABET)


def test_temporary_password_shape():
    base36 = set(string.digits + string.ascii_lowercase)
    for _ in range(50):
        password = generate_temporary_password()
        assert len(password) == 16
        assert set(password[:8]) <= base36
        assert set(password[8:]) <= {c.upper() for c in base36}


def test_codes_match_ignores_case():
    assert codes_match("AB12CD", "ab12cd")
    assert codes_match("AB12CD", "Ab12Cd")
    assert not codes_match("AB12CD", "AB12CE")


def test_codes_match_handles_non_ascii_input():
    assert not codes_match("AB12CD", "ÄB12CD")
