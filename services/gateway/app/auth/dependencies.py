# =============================================================================
# Authorization Dependencies
# =============================================================================
# FastAPI dependencies for function key authorization.
# =============================================================================

from typing import Optional

from fastapi import Depends, Header, HTTPException, Query, status

from app.auth.providers import AuthorizedCaller, FunctionKeyProvider
from app.config import Settings, get_settings


def get_auth_provider(settings: Settings = Depends(get_settings)) -> FunctionKeyProvider:
    """Get the authorization provider instance."""
    return FunctionKeyProvider(function_key=settings.function_key)


def require_function_key(
    x_functions_key: Optional[str] = Header(None),
    code: Optional[str] = Query(None, description="Function key"),
    auth_provider: FunctionKeyProvider = Depends(get_auth_provider),
) -> AuthorizedCaller:
    """
    Validate the function key presented by the caller.

    Raises:
        HTTPException: 401 Unauthorized if the key is missing or wrong.
    """
    caller = auth_provider.authorize({"header": x_functions_key, "query": code})

    if caller is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid function key",
        )

    return caller
