from __future__ import annotations

from .google_translator import DEFAULT_TIMEOUT, GoogleTranslator
from .translator import TranslationEngine


def get_translation_engine(name: str = "google", timeout: float = DEFAULT_TIMEOUT) -> TranslationEngine:
    """
    根据名称返回对应的翻译引擎实例。

    支持：
      - "google" : GoogleTranslator
    """
    key = name.lower()
    if key == "google":
        return GoogleTranslator(timeout=timeout)
    raise ValueError(f"Unknown translation engine: {name}")
