"""Error taxonomy for the registration flow."""

from __future__ import annotations

MISSING_FIELD_MESSAGE = "Name and email are required"
INVALID_NAME_MESSAGE = "Invalid name: please enter a single word with letters only."
INVALID_EMAIL_MESSAGE = "Invalid email: please enter a valid email address."
MALFORMED_INPUT_MESSAGE = "Invalid JSON format"
DUPLICATE_EMAIL_MESSAGE = "A visitor with this email already exists."
STORAGE_ERROR_MESSAGE = "Failed to save visitor to database"


class RegistrationError(Exception):
    """Base class for registration failures."""

    default_message = "Registration failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class VisitorValidationError(RegistrationError):
    """Client supplied a payload that cannot be registered."""


class MalformedInputError(VisitorValidationError):
    default_message = MALFORMED_INPUT_MESSAGE


class MissingFieldError(VisitorValidationError):
    default_message = MISSING_FIELD_MESSAGE


class InvalidNameError(VisitorValidationError):
    default_message = INVALID_NAME_MESSAGE


class InvalidEmailError(VisitorValidationError):
    default_message = INVALID_EMAIL_MESSAGE


class DuplicateEmailError(RegistrationError):
    default_message = DUPLICATE_EMAIL_MESSAGE


class StorageError(RegistrationError):
    """The visitor row could not be written. Never shown to clients."""

    default_message = STORAGE_ERROR_MESSAGE
