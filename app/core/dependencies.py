# app/core/dependencies.py

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.exceptions import Unauthenticated
from app.core.security import decode_token

logger = logging.getLogger(__name__)

# auto_error is off so a missing header becomes our own 401 instead of FastAPI's 403
security = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """FastAPI dependency: return the verified `user_id` claim from a Bearer token."""
    if credentials is None or not credentials.credentials:
        raise Unauthenticated("No token")

    payload = decode_token(credentials.credentials)
    user_id = payload.get("user_id")
    if not user_id:
        logger.warning("Token payload missing user_id")
        raise Unauthenticated("Invalid token payload")

    return str(user_id)
