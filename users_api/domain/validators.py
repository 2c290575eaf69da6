"""
Field validators for user operations.

All validators are pure and synchronous. They raise InvalidTypeError when a
value has the wrong shape and InvalidFormatError when it breaks a format rule,
and they always run before any database call.
"""

# Standard library imports
import re
from typing import Any

# Local application imports
from .constants import UpdateFields
from .errors import InvalidFormatError, InvalidTypeError, NoDataChangedError
from .models.user_update import UserUpdate

ID_LENGTH = 24
MIN_USERNAME_LENGTH = 4
MIN_PASSWORD_LENGTH = 8
# bcrypt input limit
MAX_PASSWORD_BYTES = 72

BLANK_SPACES_PATTERN = re.compile(r"\r?\n|\r|\t| ")
EMAIL_PATTERN = re.compile(
    r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)
TOKEN_PATTERN = re.compile(r"^[a-zA-Z0-9\-_]+\.[a-zA-Z0-9\-_]+\.[a-zA-Z0-9\-_]+$")


def _validate_string(value: Any, label: str) -> None:
    if not isinstance(value, str):
        raise InvalidTypeError(f"{label} is not a string")
    if not value.strip():
        raise InvalidFormatError(f"{label} is empty or blank")


def _has_blank_spaces(value: str) -> bool:
    return BLANK_SPACES_PATTERN.search(value) is not None


def validate_id(user_id: Any) -> None:
    _validate_string(user_id, "id")
    if _has_blank_spaces(user_id):
        raise InvalidFormatError("id has blank spaces")
    if len(user_id) != ID_LENGTH:
        raise InvalidFormatError(f"id does not have {ID_LENGTH} characters")


def validate_name(name: Any) -> None:
    _validate_string(name, "name")
    if name.strip() != name:
        raise InvalidFormatError("blank spaces around name")


def validate_username(username: Any) -> None:
    _validate_string(username, "username")
    if _has_blank_spaces(username):
        raise InvalidFormatError("username has blank spaces")
    if len(username) < MIN_USERNAME_LENGTH:
        raise InvalidFormatError(f"username has less than {MIN_USERNAME_LENGTH} characters")


def validate_email(email: Any) -> None:
    _validate_string(email, "email")
    if _has_blank_spaces(email):
        raise InvalidFormatError("email has blank spaces")
    if EMAIL_PATTERN.match(email.lower()) is None:
        raise InvalidFormatError("email does not have a valid email format")


def _validate_secret(value: Any, label: str) -> None:
    _validate_string(value, label)
    if _has_blank_spaces(value):
        raise InvalidFormatError(f"{label} has blank spaces")
    if len(value) < MIN_PASSWORD_LENGTH:
        raise InvalidFormatError(f"{label} has less than {MIN_PASSWORD_LENGTH} characters")
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise InvalidFormatError(f"{label} is longer than {MAX_PASSWORD_BYTES} bytes")


def validate_password(password: Any) -> None:
    _validate_secret(password, "password")


def validate_new_password(new_password: Any) -> None:
    _validate_secret(new_password, "new password")


def validate_token(token: Any) -> None:
    """Check that a bearer token has the three segments of a JWT"""
    if not isinstance(token, str):
        raise InvalidTypeError("token is not a string")
    if TOKEN_PATTERN.match(token) is None:
        raise InvalidFormatError("invalid token")


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


def validate_update_payload(data: Any) -> UserUpdate:
    """
    Validate a raw update mapping and turn it into a UserUpdate

    Args:
        data: Mapping with favorites, or password plus any of
            newName/newUsername/newEmail/newPassword

    Returns:
        UserUpdate holding only the validated changes

    Raises:
        InvalidTypeError: If data or one of its values has the wrong shape
        InvalidFormatError: If a value breaks a format rule
        NoDataChangedError: If no recognised change is present
    """
    if not isinstance(data, dict):
        raise InvalidTypeError("data is not an object")

    if UpdateFields.FAVORITES in data:
        favorites = data[UpdateFields.FAVORITES]
        if not isinstance(favorites, list):
            raise InvalidTypeError("favorites is not an array")
        if not all(isinstance(favorite, str) for favorite in favorites):
            raise InvalidTypeError("favorites is not an array of strings")
        return UserUpdate(favorites=list(favorites))

    new_name = data.get(UpdateFields.NEW_NAME)
    new_username = data.get(UpdateFields.NEW_USERNAME)
    new_email = data.get(UpdateFields.NEW_EMAIL)
    new_password = data.get(UpdateFields.NEW_PASSWORD)

    if not any(_is_set(value) for value in (new_name, new_username, new_email, new_password)):
        raise NoDataChangedError()

    password = data.get(UpdateFields.PASSWORD)
    validate_password(password)

    if _is_set(new_name):
        validate_name(new_name)
    if _is_set(new_username):
        validate_username(new_username)
    if _is_set(new_email):
        validate_email(new_email)
    if _is_set(new_password):
        validate_new_password(new_password)

    return UserUpdate(
        new_name=new_name if _is_set(new_name) else None,
        new_username=new_username if _is_set(new_username) else None,
        new_email=new_email if _is_set(new_email) else None,
        new_password=new_password if _is_set(new_password) else None,
        password=password,
    )
