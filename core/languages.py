# =============================================================================
# core/languages.py  —  The static list of supported translation languages
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the 15 languages most translation services handle well, and
#   serializes them to a JSON document for the GetSupportedLanguages tool.
#
# LOCAL RECOVERY:
#   This is the ONE handler that never raises.  If encoding fails, the error
#   is logged and the caller gets {"error": "..."} as a normal response.
#   The encoder is a parameter so tests can force that path.
# =============================================================================

import json
import logging
from dataclasses import asdict
from typing import Callable

from core.models import SupportedLanguage

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES: tuple[SupportedLanguage, ...] = (
    SupportedLanguage("en", "English"),
    SupportedLanguage("es", "Spanish"),
    SupportedLanguage("fr", "French"),
    SupportedLanguage("de", "German"),
    SupportedLanguage("it", "Italian"),
    SupportedLanguage("pt", "Portuguese"),
    SupportedLanguage("ru", "Russian"),
    SupportedLanguage("ja", "Japanese"),
    SupportedLanguage("ko", "Korean"),
    SupportedLanguage("zh", "Chinese"),
    SupportedLanguage("ar", "Arabic"),
    SupportedLanguage("hi", "Hindi"),
    SupportedLanguage("nl", "Dutch"),
    SupportedLanguage("pl", "Polish"),
    SupportedLanguage("tr", "Turkish"),
)


def _pretty_json(document: dict) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False)


def get_supported_languages(encoder: Callable[[dict], str] = _pretty_json) -> str:
    """Return the supported languages as a JSON document.

    Success:  {"languages": [{"code": "en", "name": "English"}, ...]}
    Failure:  {"error": "<message>"}
    """
    try:
        logger.info("Retrieving supported languages")
        return encoder({"languages": [asdict(lang) for lang in SUPPORTED_LANGUAGES]})
    except Exception as e:
        logger.exception("Error retrieving supported languages")
        return json.dumps({"error": str(e)})
