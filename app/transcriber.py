from __future__ import annotations

import logging
from typing import Any

from groq import AsyncGroq

from app.config import (
    GROQ_API_KEY,
    LANGUAGE_HINT,
    PRIOR_PROMPT,
    RESPONSE_FORMAT,
    TRANSCRIPTION_MODEL,
)
from app.models import Segment

logger = logging.getLogger(__name__)

_adapter: TranscriptionAdapter | None = None


class TranscriptionAdapter:
    """Sends one audio upload to Groq's Whisper endpoint and returns its segments.

    ``language_hint`` and ``prior_prompt`` are only forwarded when set, so the
    default adapter leaves language detection to the provider. A hint plus a
    prompt describing the expected mix of languages helps with code-switched
    recordings.
    """

    def __init__(
        self,
        client: Any,
        model: str = TRANSCRIPTION_MODEL,
        language_hint: str | None = None,
        prior_prompt: str | None = None,
    ) -> None:
        self.client = client
        self.model = model
        self.language_hint = language_hint
        self.prior_prompt = prior_prompt

    def _request_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {
            "model": self.model,
            "response_format": RESPONSE_FORMAT,
        }
        if self.language_hint:
            options["language"] = self.language_hint
        if self.prior_prompt:
            options["prompt"] = self.prior_prompt
        return options

    async def transcribe(self, filename: str, data: bytes) -> list[Segment]:
        options = self._request_options()
        logger.debug("Sending %s (%d bytes) to Groq with %s", filename, len(data), options)
        transcription = await self.client.audio.transcriptions.create(
            file=(filename, data),
            **options,
        )
        return parse_segments(transcription)


def parse_segments(transcription: Any) -> list[Segment]:
    # verbose_json segments arrive as extra fields, so they may be dicts or objects.
    if isinstance(transcription, dict):
        raw_segments = transcription.get("segments")
    else:
        raw_segments = getattr(transcription, "segments", None)
    if not raw_segments:
        return []
    return [Segment.model_validate(raw, from_attributes=True) for raw in raw_segments]


def get_adapter() -> TranscriptionAdapter:
    global _adapter
    if _adapter is None:
        # AsyncGroq raises GroqError here when no API key is configured.
        client = AsyncGroq(api_key=GROQ_API_KEY)
        _adapter = TranscriptionAdapter(
            client,
            language_hint=LANGUAGE_HINT,
            prior_prompt=PRIOR_PROMPT,
        )
    return _adapter
