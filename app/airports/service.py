"""Service layer for the airports collection."""

import logging
from dataclasses import dataclass
from typing import List

from pydantic import ValidationError as SchemaError
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.airports.schemas import AirportCreate, AirportRecord, AirportUpdate
from app.core.config import AIRPORTS_COLLECTION
from app.core.database import Database
from app.core.exceptions import DuplicateAirportError, ReadError, WriteError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchCount:
    """Documents matched by an update. Zero means not found, not failure."""
    matched: int

    @property
    def found(self) -> bool:
        return self.matched > 0


@dataclass(frozen=True)
class DeletedCount:
    """Documents removed by a delete. Zero means not found, not failure."""
    deleted: int

    @property
    def found(self) -> bool:
        return self.deleted > 0


class AirportService:
    """
    Point operations on the airports collection.

    Store failures of any kind are logged here and re-raised as
    ``ReadError`` / ``WriteError`` so views never see driver exceptions.
    ``AdapterUnavailableError`` from an unconnected database passes through
    unchanged (it is already an ``AdapterError``).
    """

    def __init__(self, database: Database):
        self.database = database

    def get_collection(self):
        return self.database.get_collection(AIRPORTS_COLLECTION)

    @staticmethod
    def _to_records(docs: List[dict]) -> List[AirportRecord]:
        try:
            return [AirportRecord.from_document(doc) for doc in docs]
        except SchemaError as e:
            logger.exception("Malformed airport document in store")
            raise ReadError(str(e)) from e

    async def find_all(self) -> List[AirportRecord]:
        """Every airport, unfiltered. Empty list when the collection is empty."""
        collection = self.get_collection()
        try:
            docs = await collection.find({}).to_list(length=None)
        except PyMongoError as e:
            logger.exception("Failed to fetch airports")
            raise ReadError(str(e)) from e
        return self._to_records(docs)

    async def find_by_predicate(self, predicate: dict) -> List[AirportRecord]:
        collection = self.get_collection()
        try:
            docs = await collection.find(predicate).to_list(length=None)
        except PyMongoError as e:
            logger.exception(f"Failed to query airports with {predicate}")
            raise ReadError(str(e)) from e
        return self._to_records(docs)

    async def insert_one(self, airport: AirportCreate) -> AirportRecord:
        """Insert and return the stored airport, including its ``_id``."""
        collection = self.get_collection()
        doc = airport.model_dump()
        try:
            result = await collection.insert_one(doc)
        except DuplicateKeyError as e:
            logger.info(f"Rejected duplicate airport {airport.iataCode}")
            raise DuplicateAirportError(airport.iataCode) from e
        except PyMongoError as e:
            logger.exception(f"Failed to insert airport {airport.iataCode}")
            raise WriteError(str(e)) from e

        doc["_id"] = result.inserted_id
        return AirportRecord.from_document(doc)

    async def update_one(self, iata_code: str, update: AirportUpdate) -> MatchCount:
        """
        Set the supplied fields on the first airport with this IATA code.

        With nothing to set, only checks that the airport exists.
        """
        collection = self.get_collection()
        changes = update.changes()
        try:
            if not changes:
                matched = await collection.count_documents({"iataCode": iata_code}, limit=1)
                return MatchCount(matched=matched)
            result = await collection.update_one({"iataCode": iata_code}, {"$set": changes})
        except PyMongoError as e:
            logger.exception(f"Failed to update airport {iata_code}")
            raise WriteError(str(e)) from e
        return MatchCount(matched=result.matched_count)

    async def delete_one(self, iata_code: str) -> DeletedCount:
        collection = self.get_collection()
        try:
            result = await collection.delete_one({"iataCode": iata_code})
        except PyMongoError as e:
            logger.exception(f"Failed to delete airport {iata_code}")
            raise WriteError(str(e)) from e
        return DeletedCount(deleted=result.deleted_count)
