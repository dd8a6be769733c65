# =============================================================================
# Tracking Record Model
# =============================================================================
# Defines the tracking record handed to the downstream lineage processor.
# =============================================================================

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


__all__ = [
    "TrackingRecord",
    "TrackingStatus",
    "DEFAULT_RETRY_COUNT",
    "DEFAULT_IS_ARCHIVED",
    "build_tracking_record",
]


DEFAULT_RETRY_COUNT = 3
DEFAULT_IS_ARCHIVED = True


class TrackingStatus(str, Enum):
    """
    Processing state of an archived lineage event.

    The gateway only ever writes UNPROCESSED. The downstream processor moves
    records through PROCESSING to PROCESSED or FAILED.
    """

    UNPROCESSED = "UNPROCESSED"
    PROCESSING = "PROCESSING"
    PROCESSED = "PROCESSED"
    FAILED = "FAILED"


class TrackingRecord(BaseModel):
    """
    Tracking document for one archived lineage event.

    Stored with camelCase keys, the layout the downstream processor reads.

    Attributes:
        qualifier_name: Job identity derived from the normalized job name
        record_key: Composite artifact key ({runId}_{jobName}_{timestamp})
        status: Lifecycle state (UNPROCESSED at creation)
        retry_count: Remaining retry budget for the downstream processor
        is_archived: Whether the raw event is already archived
        file_path: Locator of the archived event (container/fileName)
        created_at: When the event was captured (UTC)
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    qualifier_name: str = Field(..., alias="qualifierName", description="Job qualifier name")
    record_key: str = Field(..., alias="recordKey", description="Composite artifact key")
    status: TrackingStatus = Field(
        TrackingStatus.UNPROCESSED, description="Lifecycle state"
    )
    retry_count: int = Field(
        DEFAULT_RETRY_COUNT,
        alias="retryCount",
        ge=0,
        description="Remaining retry budget",
    )
    is_archived: bool = Field(
        DEFAULT_IS_ARCHIVED, alias="isArchived", description="Raw event archived"
    )
    file_path: str = Field(..., alias="filePath", description="container/fileName")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="createdAt",
        description="Capture timestamp",
    )

    def to_document(self) -> dict:
        """Serialize to the camelCase document stored in the tracking collection."""
        return self.model_dump(by_alias=True)


def build_tracking_record(
    record_key: str,
    qualifier_name: str,
    file_path: str,
    *,
    retry_count: int = DEFAULT_RETRY_COUNT,
    is_archived: bool = DEFAULT_IS_ARCHIVED,
    created_at: Optional[datetime] = None,
) -> TrackingRecord:
    """
    Build the initial tracking record for a freshly archived event.

    Args:
        record_key: Artifact key shared with the archived payload
        qualifier_name: Job qualifier name
        file_path: Archive locator (container/fileName)
        retry_count: Initial retry budget
        is_archived: Initial archived flag
        created_at: Capture instant (defaults to now, UTC)

    Returns:
        TrackingRecord in the UNPROCESSED state
    """
    fields = {
        "qualifier_name": qualifier_name,
        "record_key": record_key,
        "status": TrackingStatus.UNPROCESSED,
        "retry_count": retry_count,
        "is_archived": is_archived,
        "file_path": file_path,
    }
    if created_at is not None:
        fields["created_at"] = created_at
    return TrackingRecord(**fields)
