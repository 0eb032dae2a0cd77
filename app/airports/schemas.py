"""Schemas for airport records, write requests and responses."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class AirportCreate(BaseModel):
    """Validated body of a create request."""
    name: str
    iataCode: str
    city: str


class AirportUpdate(BaseModel):
    """Validated body of an update request. Unset fields are left alone."""
    name: Optional[str] = None
    city: Optional[str] = None

    def changes(self) -> dict:
        """Fields to ``$set``: only those supplied by the client."""
        return self.model_dump(exclude_none=True)


class AirportRecord(BaseModel):
    """Stored airport as returned to clients."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id")
    name: Optional[str] = None
    iataCode: Optional[str] = None
    city: Optional[str] = None

    @classmethod
    def from_document(cls, doc: dict) -> "AirportRecord":
        data = dict(doc)
        if data.get("_id") is not None:
            data["_id"] = str(data["_id"])
        return cls.model_validate(data)


class CityAirport(BaseModel):
    """Airport entry inside a city search result."""
    name: Optional[str] = None
    iataCode: Optional[str] = None


class CitySearchResponse(BaseModel):
    """Airports whose city contains the (normalized) search text."""
    city: str
    airports: List[CityAirport]


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
