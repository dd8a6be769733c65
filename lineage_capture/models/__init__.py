# =============================================================================
# Data Models Library
# =============================================================================
# Pydantic models for tracking records and gateway configuration.
# =============================================================================

"""
Data models for the lineage capture gateway.

This library provides:
- TrackingRecord: tracking document for an archived lineage event
- TrackingStatus: lifecycle vocabulary shared with the downstream processor
- Configuration models for the object store and the tracking store
"""

# Tracking models
from .tracking import (
    DEFAULT_IS_ARCHIVED,
    DEFAULT_RETRY_COUNT,
    TrackingRecord,
    TrackingStatus,
    build_tracking_record,
)

# Configuration models
from .config import (
    StorageSettings,
    TrackingSettings,
)

__all__ = [
    # Tracking models
    "DEFAULT_IS_ARCHIVED",
    "DEFAULT_RETRY_COUNT",
    "TrackingRecord",
    "TrackingStatus",
    "build_tracking_record",
    # Configuration models
    "StorageSettings",
    "TrackingSettings",
]
