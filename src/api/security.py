"""JWT verification and operator identity dependencies.

Tokens are issued by the external identity provider; this service only
verifies them and reads the subject.
"""

import os
import logging
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from adapter.identity.request_token_provider import RequestTokenProvider

logger = logging.getLogger(__name__)

# JWT Configuration
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not JWT_SECRET_KEY:
    raise ValueError(
        "JWT_SECRET_KEY environment variable is required. "
        "Use the signing key configured in the identity provider."
    )
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

# Cookie the identity provider's frontend SDK stores the session token in
SESSION_COOKIE_NAME = "__session"

security = HTTPBearer(auto_error=False)


def verify_token(token: str) -> Optional[str]:
    """Verify JWT token and extract the operator id (``sub``)."""
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
        operator_id: str = payload.get("sub")
        if operator_id is None:
            return None
        return operator_id
    except JWTError as e:
        logger.debug(f"JWT verification failed: {e}")
        return None


def _extract_token(request: Request, credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    if credentials:
        return credentials.credentials
    return request.cookies.get(SESSION_COOKIE_NAME)


def get_token_provider(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> RequestTokenProvider:
    """Token provider for the HTML views. Signed out when the token is absent or invalid."""
    token = _extract_token(request, credentials)
    operator_id = verify_token(token) if token else None
    return RequestTokenProvider(token=token, operator_id=operator_id)


def get_current_operator_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Get the operator id from the bearer token (optional). Returns None if absent or invalid."""
    if not credentials:
        return None
    return verify_token(credentials.credentials)
