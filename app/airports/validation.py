"""Validation of raw write payloads into typed requests."""

from typing import Any, Mapping, Optional

from app.airports.schemas import AirportCreate, AirportUpdate
from app.core.exceptions import ValidationError

REQUIRED_FIELDS = ("name", "iataCode", "city")
UPDATABLE_FIELDS = ("name", "city")


def _coerce(value: Any) -> Optional[str]:
    """
    Basic coercion of a body value to a stripped string.

    ``None`` and blank strings count as absent. Numbers are stringified.
    Booleans, nested objects, arrays and anything else are rejected.
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValidationError("Invalid field type")
    text = str(value).strip()
    return text or None


def iata_key(raw: str) -> str:
    """IATA code as stored: surrounding whitespace removed, case kept."""
    return (raw or "").strip()


def validate_create(raw: Mapping[str, Any]) -> AirportCreate:
    """All of name, iataCode and city must be present and non-empty."""
    values = {}
    for field in REQUIRED_FIELDS:
        try:
            value = _coerce(raw.get(field))
        except ValidationError:
            raise ValidationError("Missing required fields") from None
        if value is None:
            raise ValidationError("Missing required fields")
        values[field] = value
    return AirportCreate(**values)


def validate_update(raw: Mapping[str, Any]) -> AirportUpdate:
    """Any subset of name and city; everything else in the body is ignored."""
    values = {}
    for field in UPDATABLE_FIELDS:
        value = _coerce(raw.get(field))
        if value is not None:
            values[field] = value
    return AirportUpdate(**values)
