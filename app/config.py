import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
STATIC_DIR = Path(__file__).resolve().parent / "static"

load_dotenv(BASE_DIR / ".env")


def _getenv_opt_str(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


GROQ_API_KEY = _getenv_opt_str("GROQ_API_KEY")

TRANSCRIPTION_MODEL = "whisper-large-v3"
RESPONSE_FORMAT = "verbose_json"

# Unset means the provider auto-detects the language.
LANGUAGE_HINT = _getenv_opt_str("TRANSCRIBE_LANGUAGE")
PRIOR_PROMPT = _getenv_opt_str("TRANSCRIBE_PROMPT")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
