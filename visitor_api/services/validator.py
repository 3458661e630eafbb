"""
Request payload validation.

Decodes the raw body into a typed payload, then checks presence and format of
each field. Pure apart from logging.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, ValidationError

from visitor_api.domain.visitors import (
    ValidVisitor,
    is_blank,
    is_valid_email,
    is_valid_name,
    normalize_email,
    normalize_name,
)
from visitor_api.services.errors import (
    InvalidEmailError,
    InvalidNameError,
    MalformedInputError,
    MissingFieldError,
)

logger = logging.getLogger(__name__)


class VisitorPayload(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


def parse_payload(raw_body: bytes) -> VisitorPayload:
    # An empty body decodes to an empty object so it reports missing fields.
    if not raw_body or not raw_body.strip():
        return VisitorPayload()
    try:
        return VisitorPayload.model_validate_json(raw_body)
    except ValidationError as exc:
        logger.warning("Invalid JSON in request body: %s", exc.errors(include_url=False, include_input=False))
        raise MalformedInputError() from exc

def validate(raw_body: bytes) -> ValidVisitor:
    """Return the normalized visitor or raise a VisitorValidationError subclass."""
    payload = parse_payload(raw_body)
    name, email = payload.name, payload.email

    if is_blank(name) or is_blank(email):
        logger.warning("Missing name or email in request")
        raise MissingFieldError()
    if not is_valid_name(name):
        logger.warning("Invalid name format: %s", name)
        raise InvalidNameError()
    if not is_valid_email(email):
        logger.warning("Invalid email format: %s", email)
        raise InvalidEmailError()

    return ValidVisitor(name=normalize_name(name), email=normalize_email(email))
