"""Audio upload route"""
import logging
from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse

from audiodrop.api.dependencies import read_audio_body
from audiodrop.config import settings
from audiodrop.core.audio import WavHeader
from audiodrop.core.storage import StorageError, build_upload_filename, write_wav_file
from audiodrop.utils.service_metrics import metrics

logger = logging.getLogger(__name__)

router = APIRouter(tags=["audio"])


@router.post("/audio", response_class=PlainTextResponse)
async def upload_audio(
    request: Request,
    uid: str = Query(default="", description="Caller identifier (logged only)"),
    sample_rate: str = Query(default="", description="Requested sample rate (logged only)"),
):
    """
    Store the raw request body as a 16kHz mono 16-bit WAV file.

    The body is taken as PCM16LE samples whatever its content type. `sample_rate`
    does not change the stored header.
    """
    logger.info(f"Received request from uid: {uid}")
    logger.info(f"Requested sample rate: {sample_rate}")

    metrics.increment_requests()

    try:
        body = await read_audio_body(request)
    except HTTPException:
        metrics.increment_client_error()
        raise

    filename = build_upload_filename()
    header = WavHeader.for_data_length(len(body))

    try:
        path = await write_wav_file(settings.storage_dir, filename, header.pack(), body)
    except StorageError as e:
        metrics.increment_server_error()
        logger.error(f"{e.message}: {e.__cause__}")
        raise HTTPException(status_code=500, detail=e.message)

    metrics.record_upload(len(body), header.duration_seconds)
    logger.info(f"Stored {len(body)} audio bytes as {path}")

    return PlainTextResponse(f"Audio bytes received and uploaded as {filename}")
