"""Request helpers shared by API routes"""
import logging

from fastapi import HTTPException, Request
from starlette.requests import ClientDisconnect

logger = logging.getLogger(__name__)


async def read_audio_body(request: Request) -> bytes:
    """Read the whole request body into memory.

    No size limit is applied. A client that disconnects mid-upload gets a 400.
    """
    try:
        return await request.body()
    except ClientDisconnect:
        logger.warning("Client disconnected before the request body was fully read")
        raise HTTPException(status_code=400, detail="Failed to read request body")
