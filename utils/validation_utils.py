"""
utils/validation_utils.py

Purpose: Input validation

- ObjectId parsing for path identifiers
- Sample size parsing for ?random=
- Sort direction parsing for ?sort=
"""

from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING

from app.core.exceptions import InvalidIdentifierError, InvalidQueryError


def to_object_id(raw: str) -> ObjectId:
    """
    Converts a path identifier to an ObjectId.

    Raises:
        InvalidIdentifierError: if raw is not a 24-character hex string
    """
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError):
        raise InvalidIdentifierError(
            f"'{raw}' is not a valid document identifier",
            details={"id": raw}
        )


def _parse_int(raw: str, name: str) -> int:
    try:
        return int(str(raw).strip())
    except ValueError:
        raise InvalidQueryError(
            f"Query parameter '{name}' must be an integer",
            details={name: raw}
        )


def parse_sample_size(raw: str) -> int:
    """
    Parses ?random= into a $sample size.

    Args:
        raw: Query value, e.g. "3"

    Returns:
        Positive sample size

    Raises:
        InvalidQueryError: for non-numeric or non-positive values
    """
    size = _parse_int(raw, "random")
    if size < 1:
        raise InvalidQueryError(
            "Query parameter 'random' must be a positive integer",
            details={"random": raw}
        )
    return size


def parse_sort_direction(raw: Optional[str]) -> Optional[int]:
    """
    Parses ?sort= into a pymongo sort direction.

    "0" or an empty value means unsorted. Positive numbers sort ascending,
    negative numbers descending.
    """
    if raw is None or raw == "" or raw == "0":
        return None
    value = _parse_int(raw, "sort")
    if value == 0:
        return None
    return ASCENDING if value > 0 else DESCENDING
