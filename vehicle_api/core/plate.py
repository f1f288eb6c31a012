"""Plate Parsing - length validation and digit normalization of caller plates.

Invariants:
    - Length is checked on the RAW string, before normalization
    - Normalization keeps ASCII digits 0-9 only (no unicode digit classes)
    - parse_plate never returns an empty PlateNumber
"""

import re

from vehicle_api.core.domain_types import PlateNumber
from vehicle_api.core.errors import InvalidPlateError

MIN_PLATE_LENGTH = 7
MAX_PLATE_LENGTH = 8

_NON_DIGITS = re.compile(r"[^0-9]")


def is_valid_length(raw: str | None) -> bool:
    """True when raw is present and 7-8 characters long (inclusive)."""
    if not raw:
        return False
    return MIN_PLATE_LENGTH <= len(raw) <= MAX_PLATE_LENGTH


def normalize_plate(raw: str) -> str:
    """Strip every character that is not an ASCII digit."""
    return _NON_DIGITS.sub("", raw)


def parse_plate(raw: str | None) -> PlateNumber:
    """Validate then normalize.

    Raises:
        InvalidPlateError: raw is absent, has the wrong length, or holds no digits.
    """
    if not is_valid_length(raw):
        raise InvalidPlateError(raw, "length must be 7-8 characters")
    digits = normalize_plate(raw)
    if not digits:
        raise InvalidPlateError(raw, "no digits after normalization")
    return PlateNumber(digits)
