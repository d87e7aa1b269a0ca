"""Field rules for driver records.

Shared by the API request schemas and the UI form so both reject the same
input with the same messages.
"""
from __future__ import annotations

import re
from typing import Iterable, List

CNH_CATEGORIES = ("ACC", "A", "A1", "B", "B1", "C", "C1", "D", "D1", "BE", "CE", "C1E", "DE", "D1E")

ALLOWED_PHOTO_TYPES = ("image/jpeg", "image/png", "image/gif")
CNH_PDF_TYPE = "application/pdf"

NAME_MIN_LENGTH = 3
NAME_PATTERN = re.compile(r"^[A-Za-zÀ-ÿ\s]+$")
_NON_DIGIT = re.compile(r"\D")

NAME_TOO_SHORT = "Name must be at least 3 characters"
NAME_BAD_CHARS = "Only letters and spaces allowed"
CPF_LENGTH = "CPF must have 11 digits"
CNH_LENGTH = "CNH must have 11 digits"
PHONE_LENGTH = "Phone must have 10 or 11 digits"
CATEGORY_REQUIRED = "Select at least one category"


def only_digits(value: str | None) -> str:
    return _NON_DIGIT.sub("", value or "")


def check_name(value: str) -> List[str]:
    errors = []
    if len(value) < NAME_MIN_LENGTH:
        errors.append(NAME_TOO_SHORT)
    if not NAME_PATTERN.match(value):
        errors.append(NAME_BAD_CHARS)
    return errors


def check_cpf(value: str) -> List[str]:
    return [] if len(only_digits(value)) == 11 else [CPF_LENGTH]


def check_cnh_number(value: str) -> List[str]:
    return [] if len(only_digits(value)) == 11 else [CNH_LENGTH]


def check_phone(value: str) -> List[str]:
    return [] if 10 <= len(only_digits(value)) <= 11 else [PHONE_LENGTH]


def split_categories(value: str | Iterable[str] | None) -> List[str]:
    """Accept either the stored comma-joined form or a list of codes."""
    if value is None:
        return []
    parts = value.split(",") if isinstance(value, str) else list(value)
    return [p.strip() for p in parts if p and p.strip()]


def check_categories(codes: List[str]) -> List[str]:
    if not codes:
        return [CATEGORY_REQUIRED]
    return [f"Unknown category: {c}" for c in codes if c not in CNH_CATEGORIES]


def join_categories(codes: Iterable[str]) -> str:
    return ",".join(codes)
