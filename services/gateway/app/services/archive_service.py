# =============================================================================
# Archive Service - Raw Lineage Event Storage
# =============================================================================
# Writes raw lineage event payloads to the S3-compatible archive bucket.
# =============================================================================

import logging
from io import BytesIO

from minio import Minio
from minio.error import MinioException
from urllib3.exceptions import HTTPError

from lineage_capture.errors import ConfigurationError, StorageError
from lineage_capture.naming import artifact_file_path
from lineage_capture.storage_uri import StorageConnection

logger = logging.getLogger(__name__)

ARCHIVE_CONTENT_TYPE = "application/json"


class ArchiveService:
    """Service for archiving raw lineage events to MinIO."""

    def __init__(self, connection: StorageConnection, container_name: str) -> None:
        self._client = Minio(
            connection.endpoint,
            access_key=connection.access_key,
            secret_key=connection.secret_key,
            secure=connection.secure,
        )
        self._container_name = container_name

    @property
    def container_name(self) -> str:
        return self._container_name

    def archive_event(self, file_name: str, payload: bytes) -> str:
        """
        Write a raw event payload to the archive bucket.

        The write is unconditional: no existence check is made, so an object
        with the same name is replaced.

        Args:
            file_name: Object key ({runId}_{jobName}_{timestamp}.json)
            payload: Raw request body bytes

        Returns:
            Archive locator in container/fileName form

        Raises:
            StorageError: If the object store rejects the write or is unreachable
            ConfigurationError: If the client rejects the bucket or object name
        """
        try:
            self._client.put_object(
                self._container_name,
                file_name,
                BytesIO(payload),
                length=len(payload),
                content_type=ARCHIVE_CONTENT_TYPE,
            )
        except (MinioException, HTTPError) as exc:
            logger.error(f"Storage operation failed: {exc}")
            raise StorageError(
                f"Failed to archive lineage event '{file_name}'.", stage="archive"
            ) from exc
        except ValueError as exc:
            logger.error(f"Invalid storage configuration: {exc}")
            raise ConfigurationError("Invalid storage configuration.") from exc

        file_path = artifact_file_path(self._container_name, file_name)
        logger.info(f"Archived lineage event to {file_path}")
        return file_path
