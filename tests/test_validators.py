"""Unit tests for field validators."""

import pytest

from userstore.domain import validators


class TestPhoneNumbers:
    @pytest.mark.parametrize("raw, cleaned", [
        ("0712 345678", "0712345678"),
        ("+254 712 345 678", "+254712345678"),
        ("0712345678", "0712345678"),
        (None, None),
    ])
    def test_clean_phone_number(self, raw, cleaned):
        assert validators.clean_phone_number(raw) == cleaned

    @pytest.mark.parametrize("phone_number", ["0712345678", "+254712345678", "0100000000"])
    def test_valid(self, phone_number):
        assert validators.is_valid_phone_number(phone_number)

    @pytest.mark.parametrize("phone_number", [
        "12345",
        "712345678",
        "+255712345678",
        "+2540712345678",
        "0712345678\n",
        "0712 345678",
        "0\u0667\u0661\u0662\u0663\u0664\u0665\u0666\u0667\u0668",
        "+254\uff17\uff11\uff12345678",
    ])
    def test_invalid(self, phone_number):
        assert not validators.is_valid_phone_number(phone_number)


class TestEmails:
    @pytest.mark.parametrize("email", ["a@b", "first.last+tag@mail.example.co.ke", "under_score@x-y.org"])
    def test_valid(self, email):
        assert validators.is_valid_email(email)

    @pytest.mark.parametrize("email", ["", "plain", "@example.com", "a@", "a b@example.com", "a@b@c"])
    def test_invalid(self, email):
        assert not validators.is_valid_email(email)


@pytest.mark.parametrize("value, blank", [(None, True), ("", True), ("  \t", True), (" x ", False)])
def test_is_blank(value, blank):
    assert validators.is_blank(value) is blank
