from __future__ import annotations

from .config import TranslatorConfig
from .errors import InvalidLanguageCode, SrtTranslatorError, TranslationRequestFailed
from .languages import is_supported_language
from .pipeline import SrtTranslationPipeline, translate_document

__all__ = [
    "TranslatorConfig",
    "SrtTranslationPipeline",
    "translate_document",
    "is_supported_language",
    "SrtTranslatorError",
    "InvalidLanguageCode",
    "TranslationRequestFailed",
]

__version__ = "0.1.0"
