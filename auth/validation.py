"""
Signup form validation.

Every rule runs on every submission and each violation becomes a
``FieldError``; the caller gets the complete list or nothing.
"""

from __future__ import annotations

import html
import re
from typing import List, Tuple

from auth.models import FieldError, SignupRequest

USERNAME_MIN = 3
USERNAME_MAX = 16
PASSWORD_MIN = 8

_WHITESPACE = re.compile(r"\s")


def sanitize(value: str) -> str:
    """Trim and HTML-escape a submitted value before it is stored or echoed."""
    return html.escape(value.strip(), quote=True)


def _username_errors(raw: str) -> List[FieldError]:
    errors = []
    if not raw:
        errors.append(FieldError(field="username", message="Username can not be empty."))
    if _WHITESPACE.search(raw):
        errors.append(FieldError(field="username", message="No spaces are allowed in the username."))
    trimmed = raw.strip()
    if len(trimmed) < USERNAME_MIN:
        errors.append(FieldError(
            field="username",
            message=f"Username must contain at least {USERNAME_MIN} characters.",
        ))
    if len(trimmed) > USERNAME_MAX:
        errors.append(FieldError(
            field="username",
            message=f"Username can not be longer than {USERNAME_MAX} characters.",
        ))
    return errors


def _password_errors(raw: str) -> List[FieldError]:
    errors = []
    if not raw:
        errors.append(FieldError(field="password", message="Password can not be empty."))
    if _WHITESPACE.search(raw):
        errors.append(FieldError(field="password", message="No spaces are allowed in the password."))
    if len(raw.strip()) < PASSWORD_MIN:
        errors.append(FieldError(
            field="password",
            message=f"Password must contain at least {PASSWORD_MIN} characters.",
        ))
    return errors


def validate_signup(form: SignupRequest) -> Tuple[str, List[FieldError]]:
    """
    Check a signup submission.

    Returns the sanitized username together with every violated rule.
    An empty list means the submission is valid.
    """
    errors = _username_errors(form.username)
    errors.extend(_password_errors(form.password))
    if form.confirm_password != form.password:
        errors.append(FieldError(field="confirmPassword", message="Passwords do not match."))
    return sanitize(form.username), errors
