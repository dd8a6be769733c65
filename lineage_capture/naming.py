# =============================================================================
# Artifact Naming
# =============================================================================
# Notebook name normalization and deterministic artifact keys.
# Keys join an archived event payload to its tracking record.
# =============================================================================

"""
Naming utilities for archived lineage events.

This module provides functions for:
- Normalizing notebook/job names by stripping a trailing qualifier suffix
- Deriving the job qualifier name stored on tracking records
- Building the composite artifact key and file name
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone

__all__ = [
    "CAPTURE_TIMESTAMP_FORMAT",
    "ARTIFACT_EXTENSION",
    "ArtifactName",
    "normalize_notebook_name",
    "qualifier_name",
    "format_capture_timestamp",
    "build_artifact_key",
    "build_artifact_name",
    "artifact_file_path",
]

logger = logging.getLogger(__name__)

CAPTURE_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
ARTIFACT_EXTENSION = ".json"

# Characters rejected in record keys by key-value table stores
_DISALLOWED_KEY_CHARS = re.compile(r"[/\\#?\x00-\x1f\x7f-\x9f]")


@dataclass(frozen=True)
class ArtifactName:
    """Deterministic name of one archived lineage event."""

    key: str
    file_name: str
    captured_at: datetime


def normalize_notebook_name(name: str) -> str:
    """
    Strip everything from the first "." onwards.

    Names without a "." are returned unchanged, so normalizing twice is the
    same as normalizing once. Never raises: on failure the input is logged
    and returned as-is.

    Examples:
        >>> normalize_notebook_name("etl_job.py")
        'etl_job'
        >>> normalize_notebook_name("sales.daily.load")
        'sales'
        >>> normalize_notebook_name("etl_job")
        'etl_job'
    """
    try:
        head, separator, _ = name.partition(".")
        return head if separator else name
    except (AttributeError, TypeError) as e:
        logger.warning(f"Failed to trim notebook name {name!r}: {e}")
        return name


def qualifier_name(job_name: str, prefix: str = "") -> str:
    """
    Derive the qualifier name that identifies a job on its tracking records.

    Characters that key-value stores reject in keys ("/", "\\", "#", "?" and
    control characters) are replaced with "_", and the optional namespace
    prefix is prepended.

    Args:
        job_name: Normalized job name
        prefix: Optional namespace prefix (e.g., a workspace name)

    Returns:
        Qualifier name

    Examples:
        >>> qualifier_name("etl_job")
        'etl_job'
        >>> qualifier_name("team/etl#1", prefix="prod_")
        'prod_team_etl_1'
    """
    return f"{prefix}{_DISALLOWED_KEY_CHARS.sub('_', job_name)}"


def format_capture_timestamp(instant: datetime) -> str:
    """
    Format a capture instant as a fixed-width UTC string (YYYYMMDDHHMMSS).

    Naive datetimes are taken to already be in UTC.

    Examples:
        >>> format_capture_timestamp(datetime(2025, 3, 7, 9, 5, 1))
        '20250307090501'
    """
    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc)
    return instant.strftime(CAPTURE_TIMESTAMP_FORMAT)


def build_artifact_key(run_id: str, job_name: str, instant: datetime) -> str:
    """
    Build the composite key ``{run_id}_{job_name}_{timestamp}``.

    The key has second resolution and no random component: two events with
    the same run id and job name captured in the same second share a key.
    """
    return f"{run_id}_{job_name}_{format_capture_timestamp(instant)}"


def build_artifact_name(run_id: str, job_name: str, instant: datetime) -> ArtifactName:
    """
    Build the key and file name for an archived event.

    Args:
        run_id: Lineage run identifier
        job_name: Normalized job name
        instant: Capture instant

    Returns:
        ArtifactName with ``file_name == key + ".json"``
    """
    key = build_artifact_key(run_id, job_name, instant)
    return ArtifactName(
        key=key,
        file_name=f"{key}{ARTIFACT_EXTENSION}",
        captured_at=instant,
    )


def artifact_file_path(container: str, file_name: str) -> str:
    """
    Locator of an archived artifact in ``container/fileName`` form.

    Examples:
        >>> artifact_file_path("lineage-events", "r1_etl_job_20250307090501.json")
        'lineage-events/r1_etl_job_20250307090501.json'
    """
    return f"{container}/{file_name}"
