"""Tests for create/update payload validation."""

import pytest

from app.airports.schemas import AirportCreate, AirportUpdate
from app.airports.validation import iata_key, validate_create, validate_update
from app.core.exceptions import ValidationError


class TestValidateCreate:

    def test_accepts_complete_payload(self):
        airport = validate_create({"name": "Heathrow", "iataCode": "LHR", "city": "London"})
        assert airport == AirportCreate(name="Heathrow", iataCode="LHR", city="London")

    @pytest.mark.parametrize("missing", ["name", "iataCode", "city"])
    def test_rejects_missing_field(self, missing):
        payload = {"name": "Heathrow", "iataCode": "LHR", "city": "London"}
        del payload[missing]
        with pytest.raises(ValidationError) as exc:
            validate_create(payload)
        assert exc.value.message == "Missing required fields"

    @pytest.mark.parametrize("blank", ["", "   ", None])
    def test_rejects_blank_values(self, blank):
        with pytest.raises(ValidationError):
            validate_create({"name": "Heathrow", "iataCode": blank, "city": "London"})

    def test_rejects_nested_values(self):
        with pytest.raises(ValidationError) as exc:
            validate_create({"name": ["Heathrow"], "iataCode": "LHR", "city": "London"})
        assert exc.value.message == "Missing required fields"

    @pytest.mark.parametrize("flag", [True, False])
    def test_rejects_booleans(self, flag):
        with pytest.raises(ValidationError) as exc:
            validate_create({"name": flag, "iataCode": "LHR", "city": "London"})
        assert exc.value.message == "Missing required fields"

    def test_rejects_non_scalar_objects(self):
        with pytest.raises(ValidationError):
            validate_create({"name": object(), "iataCode": "LHR", "city": "London"})

    def test_coerces_numbers_and_strips(self):
        airport = validate_create({"name": " Field 51 ", "iataCode": 123, "city": "Nowhere"})
        assert airport.name == "Field 51"
        assert airport.iataCode == "123"

    def test_no_iata_format_check(self):
        airport = validate_create({"name": "Odd", "iataCode": "not-iata", "city": "Town"})
        assert airport.iataCode == "not-iata"

    def test_extra_fields_are_dropped(self):
        airport = validate_create(
            {"name": "Heathrow", "iataCode": "LHR", "city": "London", "_id": "x", "admin": True}
        )
        assert airport.model_dump() == {"name": "Heathrow", "iataCode": "LHR", "city": "London"}


class TestValidateUpdate:

    def test_partial_update(self):
        update = validate_update({"city": "Chicago"})
        assert update == AirportUpdate(city="Chicago")
        assert update.changes() == {"city": "Chicago"}

    def test_iata_code_is_not_updatable(self):
        update = validate_update({"iataCode": "XXX", "name": "New name"})
        assert update.changes() == {"name": "New name"}

    def test_blank_fields_are_not_supplied(self):
        assert validate_update({"name": "", "city": None}).changes() == {}

    def test_empty_payload(self):
        assert validate_update({}).changes() == {}

    def test_rejects_nested_values(self):
        with pytest.raises(ValidationError):
            validate_update({"city": {"$ne": ""}})

    @pytest.mark.parametrize("flag", [True, False])
    def test_rejects_booleans(self, flag):
        with pytest.raises(ValidationError) as exc:
            validate_update({"name": flag})
        assert exc.value.message == "Invalid field type"


@pytest.mark.parametrize("raw, expected", [(" abc ", "abc"), ("LHR", "LHR"), ("jfk", "jfk")])
def test_iata_key_matches_stored_form(raw, expected):
    assert iata_key(raw) == expected
    assert validate_create({"name": "n", "iataCode": raw, "city": "c"}).iataCode == expected
