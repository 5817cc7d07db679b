"""
Field rules for UserRequest payloads.

The validator never raises: it returns the violations in field order
(name, email, password) and the use cases decide what to do with them.
Values with leading/trailing whitespace are rejected, not trimmed, on both
create and update.

Email is a shape check only (local@domain): no DNS lookup, dotless and
special-use domains such as localhost or .local are accepted.
"""
from dataclasses import dataclass

import email_validator
from email_validator import EmailNotValidError, validate_email

from app.application.dtos.user import UserRequest

BLANK_MESSAGE = "Must not be null or empty"
WHITESPACE_MESSAGE = "field cannot have blank spaces at the beginning or at end"
EMAIL_MESSAGE = "Invalid email"

NAME_MIN, NAME_MAX = 3, 50
PASSWORD_MIN, PASSWORD_MAX = 3, 20

# Domínios reservados (localhost, .local, ...) são endereços válidos aqui
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


@dataclass(frozen=True)
class FieldViolation:
    field_name: str
    message: str


def _size_message(minimum: int, maximum: int) -> str:
    return f"Must be between {minimum} and {maximum} characters"


def _check_text(field_name: str, value: str | None, partial: bool) -> tuple[list[FieldViolation], bool]:
    """Blank and whitespace checks shared by every field; the flag says whether to keep checking."""
    if value is None:
        if partial:
            return [], False
        return [FieldViolation(field_name, BLANK_MESSAGE)], False
    if not value.strip():
        return [FieldViolation(field_name, BLANK_MESSAGE)], False
    if value != value.strip():
        return [FieldViolation(field_name, WHITESPACE_MESSAGE)], True
    return [], True


def _check_size(field_name: str, value: str, minimum: int, maximum: int) -> list[FieldViolation]:
    if not minimum <= len(value.strip()) <= maximum:
        return [FieldViolation(field_name, _size_message(minimum, maximum))]
    return []


def _check_email(value: str) -> list[FieldViolation]:
    try:
        validate_email(
            value.strip(),
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return [FieldViolation("email", EMAIL_MESSAGE)]
    return []


def validate_user_request(request: UserRequest, partial: bool = False) -> list[FieldViolation]:
    violations: list[FieldViolation] = []

    found, keep_going = _check_text("name", request.name, partial)
    violations += found
    if keep_going:
        violations += _check_size("name", request.name, NAME_MIN, NAME_MAX)

    found, keep_going = _check_text("email", request.email, partial)
    violations += found
    if keep_going:
        violations += _check_email(request.email)

    found, keep_going = _check_text("password", request.password, partial)
    violations += found
    if keep_going:
        violations += _check_size("password", request.password, PASSWORD_MIN, PASSWORD_MAX)

    return violations
