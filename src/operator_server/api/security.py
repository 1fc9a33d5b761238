import logging
import secrets
from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from src.core.config import settings

logger = logging.getLogger("operator.server.api.security")

API_KEY_NAME = "x-api-key"
api_key_header = APIKeyHeader(name=API_KEY_NAME, auto_error=False)


async def get_api_key(api_key_header: Optional[str] = Security(api_key_header)) -> Optional[str]:
    """
    Validate the API key from the request header.

    Authentication is skipped when no ``server.api_key`` is configured,
    which is the default for a localhost-bound server.
    """
    expected = settings.server.api_key
    if expected is None:
        return None

    if not api_key_header or not secrets.compare_digest(api_key_header, expected.get_secret_value()):
        logger.warning("Rejected request with missing or invalid API key")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or missing API key")

    return api_key_header
