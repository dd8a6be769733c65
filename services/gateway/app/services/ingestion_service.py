# =============================================================================
# Ingestion Service - Lineage Capture Orchestration
# =============================================================================
# Classifies an incoming lineage event and, when relevant, archives it and
# registers a tracking record for downstream processing.
# =============================================================================

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional, Union

from fastapi import Depends
from pymongo.errors import PyMongoError

from lineage_capture.classification import Rejected, classify_event
from lineage_capture.errors import ConfigurationError
from lineage_capture.models import TrackingSettings, build_tracking_record
from lineage_capture.naming import (
    build_artifact_name,
    normalize_notebook_name,
    qualifier_name,
)
from lineage_capture.storage_uri import StorageConnection

from app.config import Settings, get_settings
from app.services.archive_service import ArchiveService
from app.services.tracking_service import TrackingService

logger = logging.getLogger(__name__)

STATUS_STORED = "stored"
STATUS_SKIPPED = "skipped"

ArchiveFactory = Callable[[StorageConnection, str], ArchiveService]
TrackingFactory = Callable[[TrackingSettings], TrackingService]


@dataclass
class IngestionResult:
    """Outcome of one lineage capture request."""

    status: str
    message: str
    record_key: Optional[str] = None
    file_path: Optional[str] = None


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class IngestionService:
    """
    Request-scoped lineage capture flow.

    Holds no state between requests: store clients are created per call from
    the injected settings and released before returning.
    """

    def __init__(
        self,
        settings: Settings,
        archive_factory: ArchiveFactory = ArchiveService,
        tracking_factory: TrackingFactory = TrackingService,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._settings = settings
        self._archive_factory = archive_factory
        self._tracking_factory = tracking_factory
        self._clock = clock

    def ingest(
        self, body: Union[str, bytes], event_type: Optional[str] = None
    ) -> IngestionResult:
        """
        Capture one lineage event.

        Args:
            body: Raw request body
            event_type: Optional event type override from the query string

        Returns:
            IngestionResult with status "stored" or "skipped"

        Raises:
            InputError: Empty or malformed body, or missing run id / job name
            ConfigurationError: Storage configuration missing or malformed
            StorageError: Archive or tracking write failed
        """
        decision = classify_event(body, event_type)

        if isinstance(decision, Rejected):
            return IngestionResult(status=STATUS_SKIPPED, message=decision.reason)

        try:
            connection = self._settings.storage.require()
        except ConfigurationError as exc:
            logger.error(f"Storage configuration check failed: {exc}")
            raise
        container_name = self._settings.storage.container_name
        tracking_settings = self._settings.tracking

        job_name = normalize_notebook_name(decision.job_name)
        artifact = build_artifact_name(decision.run_id, job_name, self._clock())

        archive, tracking = self._open_stores(connection, container_name)
        try:
            payload = body.encode("utf-8") if isinstance(body, str) else body
            file_path = archive.archive_event(artifact.file_name, payload)

            record = build_tracking_record(
                record_key=artifact.key,
                qualifier_name=qualifier_name(
                    job_name, prefix=tracking_settings.qualifier_prefix
                ),
                file_path=file_path,
                retry_count=tracking_settings.retry_count,
                is_archived=tracking_settings.is_archived,
                created_at=artifact.captured_at,
            )
            tracking.insert_record(record)
        finally:
            tracking.close()

        logger.info("File uploaded and metadata saved.")
        return IngestionResult(
            status=STATUS_STORED,
            message="File uploaded successfully.",
            record_key=artifact.key,
            file_path=file_path,
        )

    def _open_stores(
        self, connection: StorageConnection, container_name: str
    ) -> tuple[ArchiveService, TrackingService]:
        try:
            archive = self._archive_factory(connection, container_name)
        except ValueError as exc:
            logger.error(f"Invalid storage configuration: {exc}")
            raise ConfigurationError("Invalid storage configuration.") from exc

        try:
            tracking = self._tracking_factory(self._settings.tracking)
        except PyMongoError as exc:
            logger.error(f"Invalid tracking store configuration: {exc}")
            raise ConfigurationError("Invalid tracking store configuration.") from exc

        return archive, tracking


def get_ingestion_service(settings: Settings = Depends(get_settings)) -> IngestionService:
    """Build the request-scoped ingestion service."""
    return IngestionService(settings)
