"""Unit tests for domain value objects."""

import pytest
from pydantic import ValidationError

from inkwell.domain.value import Email, Slug


class TestEmail:
    """Tests for author email validation."""

    @pytest.mark.parametrize(
        "address",
        ["ada@example.com", "ada.lovelace+blog@mail.example.org"],
    )
    def test_valid_address_is_accepted(self, address):
        assert str(Email(address)) == address

    def test_domain_is_normalized(self):
        assert Email("Ada@Example.COM").root == "Ada@example.com"

    @pytest.mark.parametrize(
        "address",
        [
            "not-an-email",
            "ada@",
            "@example.com",
            "ada@@example.com",
            "ada @example.com",
        ],
    )
    def test_malformed_address_is_rejected(self, address):
        with pytest.raises(ValidationError):
            Email(address)

    def test_overlong_address_is_rejected(self):
        with pytest.raises(ValidationError):
            Email("ada@" + "a" * 250 + ".com")


class TestSlug:
    """Tests for post slugs."""

    def test_valid_slug(self):
        assert Slug("notes-on-static-hosting").root == "notes-on-static-hosting"

    @pytest.mark.parametrize("value", ["", "Hello", "-hello", "hello--world"])
    def test_invalid_slug_is_rejected(self, value):
        with pytest.raises(ValidationError):
            Slug(value)
