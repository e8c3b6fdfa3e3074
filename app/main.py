from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.datastructures import UploadFile

from app.config import LOG_LEVEL, STATIC_DIR, TRANSCRIPTION_MODEL
from app.formatting import format_transcript
from app.models import ErrorResponse, TranscriptResponse
from app.transcriber import get_adapter

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Groq Transcriber")
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return (STATIC_DIR / "index.html").read_text(encoding="utf-8")


@app.get("/health")
def health():
    return {"status": "ok", "model": TRANSCRIPTION_MODEL}


@app.post(
    "/api/transcribe",
    response_model=TranscriptResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def transcribe(request: Request):
    try:
        form = await request.form()
        upload = form.get("file")
        if not isinstance(upload, UploadFile):
            return _error(400, "No file uploaded")

        data = await upload.read()
        if not data:
            return _error(400, "Uploaded file is empty")

        filename = upload.filename or "audio"
        logger.info("Transcribing %s (%d bytes)", filename, len(data))
        segments = await get_adapter().transcribe(filename, data)
        logger.info("Received %d segments for %s", len(segments), filename)

        return TranscriptResponse(text=format_transcript(segments))
    except Exception as exc:
        logger.exception("Transcription failed")
        return _error(500, str(exc))
