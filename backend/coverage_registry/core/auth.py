"""
Caller identity resolution.

Identities are taken from the ``X-Caller-Identity`` header as-is; verifying them
is left to the gateway in front of the service.
"""

import logging

from fastapi import Header, HTTPException, status

logger = logging.getLogger(__name__)

CALLER_HEADER = "X-Caller-Identity"


async def get_caller_identity(
    x_caller_identity: str = Header(None, alias=CALLER_HEADER),
) -> str:
    """Return the calling identity or reject the request when it is missing"""
    identity = (x_caller_identity or "").strip()
    if not identity:
        logger.warning("Request without caller identity header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {CALLER_HEADER} header",
        )
    return identity
