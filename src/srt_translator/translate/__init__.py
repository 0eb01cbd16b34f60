from __future__ import annotations

from .translator import TranslationEngine
from .google_translator import GoogleTranslator, extract_translated_text
from .factory import get_translation_engine

__all__ = [
    "TranslationEngine",
    "GoogleTranslator",
    "extract_translated_text",
    "get_translation_engine",
]
