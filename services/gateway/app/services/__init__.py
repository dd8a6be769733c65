# =============================================================================
# Services Module
# =============================================================================
# Service wrappers for MinIO, MongoDB, and the lineage capture flow.
# =============================================================================

from app.services.archive_service import ArchiveService
from app.services.tracking_service import TrackingService
from app.services.ingestion_service import (
    IngestionResult,
    IngestionService,
    get_ingestion_service,
)

__all__ = [
    # MinIO
    "ArchiveService",
    # MongoDB
    "TrackingService",
    # Capture flow
    "IngestionResult",
    "IngestionService",
    "get_ingestion_service",
]
