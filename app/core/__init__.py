"""Core module - config, database, dependencies, exceptions."""

from app.core.config import get_settings, Settings, AIRPORTS_COLLECTION
from app.core.database import ConnectionState, Database, get_db
from app.core.dependencies import read_payload
from app.core.exceptions import (
    AppException,
    NotFoundException,
    BadRequestException,
    ConflictException,
    ValidationError,
    AdapterError,
    AdapterUnavailableError,
    ReadError,
    WriteError,
    DuplicateAirportError,
)

__all__ = [
    "get_settings",
    "Settings",
    "AIRPORTS_COLLECTION",
    "ConnectionState",
    "Database",
    "get_db",
    "read_payload",
    "AppException",
    "NotFoundException",
    "BadRequestException",
    "ConflictException",
    "ValidationError",
    "AdapterError",
    "AdapterUnavailableError",
    "ReadError",
    "WriteError",
    "DuplicateAirportError",
]
