"""
Tests for signup form validation.
"""

import pytest

from auth.models import SignupRequest
from auth.validation import sanitize, validate_signup


def _form(username="testuser", password="testpassword", confirm=None) -> SignupRequest:
    return SignupRequest(
        username=username,
        password=password,
        confirmPassword=password if confirm is None else confirm,
    )


def _messages(form: SignupRequest) -> list[str]:
    _, errors = validate_signup(form)
    return [e.message for e in errors]


class TestSignupValidation:
    def test_valid_form_has_no_errors(self):
        username, errors = validate_signup(_form())
        assert username == "testuser"
        assert errors == []

    def test_empty_username(self):
        assert "Username can not be empty." in _messages(_form(username=""))

    def test_empty_username_reports_every_rule(self):
        messages = _messages(_form(username=""))
        assert "Username must contain at least 3 characters." in messages

    def test_username_with_spaces(self):
        assert "No spaces are allowed in the username." in _messages(_form(username="test user"))

    def test_username_too_short(self):
        assert "Username must contain at least 3 characters." in _messages(_form(username="te"))

    def test_username_too_long(self):
        messages = _messages(_form(username="testusertestuser2"))
        assert "Username can not be longer than 16 characters." in messages

    @pytest.mark.parametrize("username", ["abc", "a" * 16])
    def test_username_length_bounds_accepted(self, username):
        assert _messages(_form(username=username)) == []

    def test_username_whitespace_padding_is_rejected(self):
        messages = _messages(_form(username="  testuser  "))
        assert messages == ["No spaces are allowed in the username."]

    def test_empty_password(self):
        messages = _messages(_form(password="", confirm=""))
        assert "Password can not be empty." in messages

    def test_password_with_spaces(self):
        messages = _messages(_form(password="test password"))
        assert "No spaces are allowed in the password." in messages

    def test_password_too_short(self):
        messages = _messages(_form(password="testpa"))
        assert "Password must contain at least 8 characters." in messages

    def test_passwords_do_not_match(self):
        messages = _messages(_form(confirm="testpassword2"))
        assert messages == ["Passwords do not match."]

    def test_confirm_compares_before_trimming(self):
        messages = _messages(_form(password="testpassword", confirm="testpassword "))
        assert "Passwords do not match." in messages

    def test_unrelated_fields_are_all_reported(self):
        _, errors = validate_signup(_form(username="te", password="short", confirm="other"))
        fields = {e.field for e in errors}
        assert fields == {"username", "password", "confirmPassword"}

    def test_errors_are_deterministic(self):
        form = _form(username="", password="", confirm="x")
        assert validate_signup(form) == validate_signup(form)

    def test_missing_fields_default_to_empty(self):
        messages = _messages(SignupRequest())
        assert "Username can not be empty." in messages
        assert "Password can not be empty." in messages

    def test_username_is_sanitized(self):
        username, _ = validate_signup(_form(username="<b>"))
        assert username == "&lt;b&gt;"


class TestSanitize:
    def test_trims(self):
        assert sanitize("  abc ") == "abc"

    def test_escapes_html(self):
        assert sanitize("a&b\"'") == "a&amp;b&quot;&#x27;"


class TestSignupRequestCoercion:
    def test_null_fields_read_as_empty(self):
        form = SignupRequest.model_validate(
            {"username": None, "password": None, "confirmPassword": None}
        )
        assert (form.username, form.password, form.confirm_password) == ("", "", "")

    def test_null_username_reports_empty(self):
        form = SignupRequest.model_validate(
            {"username": None, "password": "testpassword", "confirmPassword": "testpassword"}
        )
        assert "Username can not be empty." in _messages(form)

    def test_numbers_read_as_text(self):
        form = SignupRequest.model_validate(
            {"username": 12345, "password": "testpassword", "confirmPassword": "testpassword"}
        )
        assert form.username == "12345"
