"""Visitor registration use case: validate, check for duplicates, persist."""

from __future__ import annotations

import logging

from visitor_api.domain.visitors import ValidVisitor
from visitor_api.repositories.visitor_repository import VisitorRepository
from visitor_api.services.errors import DuplicateEmailError
from visitor_api.services.validator import validate

logger = logging.getLogger(__name__)


class RegistrationService:
    """Runs one registration request through validation and persistence."""

    def __init__(self, repository: VisitorRepository) -> None:
        self.repository = repository

    def register(self, raw_body: bytes) -> ValidVisitor:
        """Register the visitor described by ``raw_body``.

        Raises a VisitorValidationError subclass for bad input,
        DuplicateEmailError when the email is already stored and StorageError
        when the insert fails. The existence check and the insert are separate
        statements, so two concurrent requests for one email can both succeed.
        """
        visitor = validate(raw_body)
        if self.repository.exists(visitor.email):
            logger.warning("Duplicate registration attempt for email: %s", visitor.email)
            raise DuplicateEmailError()
        self.repository.insert(visitor)
        return visitor
