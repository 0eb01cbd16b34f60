from __future__ import annotations


class SrtTranslatorError(Exception):
    """srt_translator 中所有自定义异常的基类。"""


class InvalidLanguageCode(SrtTranslatorError, ValueError):
    """
    目标语言代码不在 Google 翻译支持的语言表中。

    在读取文件与发起任何网络请求之前抛出。
    """

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(
            f'"{code}" 不是有效的 Google 翻译语言代码'
            '（例如: en, es, fr, ja, zh-CN）'
        )


class TranslationRequestFailed(SrtTranslatorError):
    """
    单条文本的翻译请求失败（网络错误、非 2xx 状态码或响应无法解析）。
    """

    def __init__(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        status: int | None = None,
        reason: str | None = None,
    ) -> None:
        self.text = text
        self.source_lang = source_lang
        self.target_lang = target_lang
        self.status = status
        self.reason = reason
        detail = f"{status} {reason or ''}".strip() if status is not None else (reason or "")
        super().__init__(
            f'Failed to translate "{text}" ({source_lang} -> {target_lang}): {detail}'
        )
