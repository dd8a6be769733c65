# =============================================================================
# Tracking Service - Tracking Record Ledger
# =============================================================================
# Inserts tracking records for archived lineage events into MongoDB.
# =============================================================================

import logging

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from lineage_capture.errors import StorageError
from lineage_capture.models import TrackingRecord, TrackingSettings

logger = logging.getLogger(__name__)


class TrackingService:
    """Service for tracking record writes. Insert-only."""

    def __init__(self, settings: TrackingSettings) -> None:
        self._client = MongoClient(settings.connection_string)
        self._db: Database = self._client[settings.database]
        self._collection_name = settings.collection

    def _get_collection(self) -> Collection:
        return self._db[self._collection_name]

    def insert_record(self, record: TrackingRecord) -> str:
        """
        Insert a tracking record.

        Args:
            record: Tracking record for an archived lineage event

        Returns:
            The inserted document's ObjectId as a string

        Raises:
            StorageError: If the insert fails
        """
        collection = self._get_collection()
        try:
            result = collection.insert_one(record.to_document())
        except PyMongoError as exc:
            logger.error(f"Storage operation failed: {exc}")
            raise StorageError(
                f"Lineage event archived to '{record.file_path}' but its tracking "
                f"record '{record.record_key}' could not be saved.",
                stage="tracking",
                file_path=record.file_path,
            ) from exc

        logger.info(f"Saved tracking record {record.record_key}")
        return str(result.inserted_id)

    def close(self) -> None:
        """Close the underlying MongoDB client."""
        self._client.close()
