from __future__ import annotations

from abc import ABC, abstractmethod


class TranslationEngine(ABC):
    """
    翻译引擎抽象接口。

    每次调用只翻译一段文本；并发调度由 Pipeline 负责，
    因此具体实现需要保证 translate_text 可以在多个线程中同时调用。
    """

    @abstractmethod
    def translate_text(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        将 text 从 source_lang 翻译为 target_lang，失败时抛出 TranslationRequestFailed。
        """
