"""Domain helpers for visitor name/email format rules."""
from __future__ import annotations

import re
from dataclasses import dataclass

NAME_PATTERN = re.compile(r"[A-Za-z]+")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_name(value: str | None) -> bool:
    """Return True for a single word made of ASCII letters only."""
    if not value:
        return False
    return bool(NAME_PATTERN.fullmatch(value))


def is_valid_email(value: str | None) -> bool:
    """Return True for a local@domain.tld shaped address without whitespace."""
    if not value:
        return False
    return bool(EMAIL_PATTERN.fullmatch(value))


def normalize_name(value: str) -> str:
    return value.strip()


def normalize_email(value: str) -> str:
    return value.strip().lower()


@dataclass(frozen=True)
class ValidVisitor:
    """A name/email pair that passed validation, already normalized."""

    name: str
    email: str
