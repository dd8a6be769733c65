# =============================================================================
# Gateway Errors
# =============================================================================
# Error taxonomy for the ingestion path. Each error carries the HTTP status
# the gateway answers with.
# =============================================================================

from typing import Optional

__all__ = [
    "GatewayError",
    "InputError",
    "ConfigurationError",
    "StorageError",
]


class GatewayError(Exception):
    """Base class for errors that terminate a lineage capture request."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputError(GatewayError):
    """Empty body, malformed JSON, or missing mandatory event fields."""

    status_code = 400


class ConfigurationError(GatewayError):
    """Required storage configuration is missing or malformed."""

    status_code = 500


class StorageError(GatewayError):
    """
    A write to the object store or the tracking store failed.

    Attributes:
        stage: Which write failed ("archive" or "tracking")
        file_path: Locator of an artifact already archived before the failure
    """

    status_code = 500

    def __init__(
        self, message: str, stage: str, file_path: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.stage = stage
        self.file_path = file_path
