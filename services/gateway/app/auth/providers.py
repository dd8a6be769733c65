# =============================================================================
# Authorization Providers
# =============================================================================
# Abstract provider interface with a shared function key implementation.
# =============================================================================

import secrets
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class AuthorizedCaller:
    """Represents a caller allowed to post lineage events."""

    name: str
    key_source: Optional[str] = None


class AuthProvider(ABC):
    """Abstract authorization provider interface."""

    @abstractmethod
    def authorize(self, credentials: dict) -> Optional[AuthorizedCaller]:
        """
        Authorize a caller with the given credentials.

        Args:
            credentials: Dictionary containing authorization details.
                         Structure varies by provider type.

        Returns:
            AuthorizedCaller if authorization succeeds, None otherwise.
        """
        ...


class FunctionKeyProvider(AuthProvider):
    """
    Shared function key authorization.

    Callers present the key in the ``x-functions-key`` header or the
    ``code`` query parameter. With no key configured every caller is
    authorized.
    """

    def __init__(self, function_key: Optional[str]) -> None:
        """
        Initialize with the expected key.

        Args:
            function_key: Expected key, or None to disable the check
        """
        self._function_key = function_key

    @property
    def enabled(self) -> bool:
        return bool(self._function_key)

    def authorize(self, credentials: dict) -> Optional[AuthorizedCaller]:
        """
        Authorize using a function key.

        Args:
            credentials: Dict with optional 'header' and 'query' keys.

        Returns:
            AuthorizedCaller if the key matches (or no key is configured),
            None otherwise.
        """
        if not self.enabled:
            return AuthorizedCaller(name="anonymous")

        for source in ("header", "query"):
            presented = credentials.get(source) or ""
            # Use constant-time comparison to prevent timing attacks
            if presented and secrets.compare_digest(
                presented.encode(), self._function_key.encode()
            ):
                return AuthorizedCaller(name="function-key", key_source=source)

        return None
