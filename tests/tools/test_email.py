"""Tests for email tools."""

import pytest

from sendinblue_api.tools.email import get_domain_from_email, is_valid_email


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("user@example.com", "example.com"),
        ("test.user@sub.domain.co.uk", "sub.domain.co.uk"),
        ("name+tag@gmail.com", "gmail.com"),
        ("user@localhost", "localhost"),
    ],
)
def test_get_domain_from_email_valid(email, expected):
    """Test extracting domain from valid email addresses."""
    assert get_domain_from_email(email) == expected


@pytest.mark.parametrize(
    "invalid_email",
    [
        None,
        "",
        "invalid-email",
        "user@",
        "@domain.com",
        "user@domain@com",
        "user@@domain.com",
        "user domain.com",
        "user@example.com;drop table users",
    ],
)
def test_get_domain_from_email_invalid(invalid_email):
    """Test handling of invalid email addresses."""
    assert get_domain_from_email(invalid_email) is None


def test_get_domain_from_email_length_limits():
    """Test handling of extremely long email addresses."""
    long_local = "a" * 65 + "@example.com"
    assert get_domain_from_email(long_local) is None


@pytest.mark.parametrize(
    "email",
    [
        "user@example.com",
        "first.last@sub.example.org",
        "name+news@gmail.com",
    ],
)
def test_is_valid_email(email):
    """Addresses with a dotted domain can be submitted."""
    assert is_valid_email(email) is True


@pytest.mark.parametrize(
    "email",
    [
        None,
        "",
        "not-an-email",
        "user@localhost",
        "user@",
        " user@example.com",
        "user@example.com\n",
    ],
)
def test_is_valid_email_invalid(email):
    """Empty, padded, bare host or malformed addresses are rejected."""
    assert is_valid_email(email) is False
