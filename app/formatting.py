from __future__ import annotations

import math
from collections.abc import Iterable

from app.models import Segment


def format_timestamp(seconds: float) -> str:
    """Render an offset as ``(M:SS)`` using whole seconds, e.g. 125.7 -> ``(2:05)``."""
    minutes, secs = divmod(math.floor(seconds), 60)
    return f"({minutes}:{secs:02d})"


def format_transcript(segments: Iterable[Segment] | None) -> str:
    if not segments:
        return ""
    return " ".join(f"{format_timestamp(seg.start)} {seg.text}" for seg in segments)
