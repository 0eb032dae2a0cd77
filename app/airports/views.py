"""API routes for the airport directory."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from app.airports.query import city_predicate, normalize_city
from app.airports.schemas import (
    AirportRecord,
    CityAirport,
    CitySearchResponse,
    ErrorResponse,
    MessageResponse,
)
from app.airports.service import AirportService
from app.airports.validation import iata_key, validate_create, validate_update
from app.core.database import Database, get_db
from app.core.dependencies import read_payload
from app.core.exceptions import (
    AdapterError,
    AppException,
    BadRequestException,
    ConflictException,
    DuplicateAirportError,
    NotFoundException,
    ValidationError,
)

router = APIRouter(prefix="/airports", tags=["Airports"])

ERRORS = {
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_airport_service(database: Database = Depends(get_db)) -> AirportService:
    return AirportService(database)


@router.get("", response_model=List[AirportRecord], responses={500: {"model": ErrorResponse}})
async def list_airports(service: AirportService = Depends(get_airport_service)):
    """All airports in the directory."""
    try:
        return await service.find_all()
    except AdapterError:
        raise AppException("Failed to fetch airports")


@router.get("/city/{city_name}", response_model=CitySearchResponse, responses=ERRORS)
async def airports_by_city(
    city_name: str,
    service: AirportService = Depends(get_airport_service),
):
    """
    Airports whose city contains `city_name`, ignoring case and extra spaces.

    The normalized search text is echoed back as `city`.
    """
    city = normalize_city(city_name)
    try:
        airports = await service.find_by_predicate(city_predicate(city))
    except AdapterError:
        raise AppException("Failed to fetch airports by city")

    if not airports:
        raise NotFoundException("No airports found for the specified city")

    return CitySearchResponse(
        city=city,
        airports=[CityAirport(name=a.name, iataCode=a.iataCode) for a in airports],
    )


@router.post(
    "",
    response_model=AirportRecord,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_airport(
    payload: Dict[str, Any] = Depends(read_payload),
    service: AirportService = Depends(get_airport_service),
):
    """Add an airport. `name`, `iataCode` and `city` are all required."""
    try:
        airport = validate_create(payload)
    except ValidationError as e:
        raise BadRequestException(e.message)

    try:
        return await service.insert_one(airport)
    except DuplicateAirportError:
        raise ConflictException("Airport with this IATA code already exists")
    except AdapterError:
        raise AppException("Failed to add airport")


@router.put("/{iata_code}", response_model=MessageResponse, responses=ERRORS)
async def update_airport(
    iata_code: str,
    payload: Dict[str, Any] = Depends(read_payload),
    service: AirportService = Depends(get_airport_service),
):
    """Update `name` and/or `city`. Fields not supplied keep their value."""
    try:
        update = validate_update(payload)
    except ValidationError as e:
        raise BadRequestException(e.message)

    try:
        result = await service.update_one(iata_key(iata_code), update)
    except AdapterError:
        raise AppException("Failed to update airport")

    if not result.found:
        raise NotFoundException("Airport not found")
    return MessageResponse(message="Airport updated successfully")


@router.delete("/{iata_code}", response_model=MessageResponse, responses=ERRORS)
async def delete_airport(
    iata_code: str,
    service: AirportService = Depends(get_airport_service),
):
    """Remove the airport with this IATA code."""
    try:
        result = await service.delete_one(iata_key(iata_code))
    except AdapterError:
        raise AppException("Failed to delete airport")

    if not result.found:
        raise NotFoundException("Airport not found")
    return MessageResponse(message="Airport deleted successfully")
