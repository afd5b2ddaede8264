"""Validation rules for user accounts."""

from __future__ import annotations

import re
from enum import IntEnum

from remotesupport import business_log
from remotesupport.exceptions import ValidationError


class UserType(IntEnum):
    FACTORY = 0
    EXPERT = 1


_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE_RE = re.compile(r"^1[3-9]\d{9}$", re.ASCII)
_USERNAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


def _is_strong(password: str) -> bool:
    has_letter = any(ch.isalpha() for ch in password)
    has_digit = any(ch.isdecimal() for ch in password)
    return has_letter and has_digit


def validate_password(password: str) -> None:
    op = "Password Validation"
    if not password:
        raise ValidationError("Password cannot be empty", "password", op)
    if len(password) < 6:
        raise ValidationError("Password must be at least 6 characters long", "password", op)
    if not _is_strong(password):
        raise ValidationError("Password is too weak", "password", op)


def validate_username(username: str) -> None:
    op = "Username Validation"
    if not username:
        raise ValidationError("Username cannot be empty", "username", op)
    if len(username) < 3:
        raise ValidationError("Username must be at least 3 characters long", "username", op)
    if len(username) > 50:
        raise ValidationError("Username cannot exceed 50 characters", "username", op)
    if not _USERNAME_RE.search(username):
        raise ValidationError("Username contains invalid characters", "username", op)


def validate_email(email: str) -> None:
    op = "Email Validation"
    if not email:
        raise ValidationError("Email cannot be empty", "email", op)
    if not _EMAIL_RE.search(email):
        raise ValidationError("Invalid email format", "email", op)


def validate_phone(phone: str) -> None:
    op = "Phone Validation"
    if not phone:
        raise ValidationError("Phone number cannot be empty", "phone", op)
    if not _PHONE_RE.search(phone):
        raise ValidationError("Invalid phone number format", "phone", op)


def validate_user_type(user_type: int) -> None:
    if user_type not in (UserType.FACTORY, UserType.EXPERT):
        raise ValidationError("Invalid user type", "userType", "User Type Validation")


def validate_registration(
    username: str, password: str, email: str, phone: str, user_type: int
) -> None:
    """Check registration data; email and phone are optional."""
    business_log.operation_start("User Registration Validation")
    try:
        validate_username(username)
        validate_password(password)
        validate_user_type(user_type)
        if email:
            validate_email(email)
        if phone:
            validate_phone(phone)
    except ValidationError as exc:
        business_log.validation_failed("User Registration", exc.field, exc.message)
        raise
    business_log.validation_success("User Registration", "All fields validated successfully")


def validate_login(username: str, password: str, user_type: int) -> None:
    business_log.operation_start("User Login Validation")
    try:
        validate_username(username)
        validate_password(password)
        validate_user_type(user_type)
    except ValidationError as exc:
        business_log.validation_failed("User Login", exc.field, exc.message)
        raise
    business_log.validation_success("User Login", "All fields validated successfully")