from __future__ import annotations

import os
from typing import Any

import requests

from srt_translator.errors import TranslationRequestFailed
from srt_translator.languages import AUTO_LANGUAGE

from .translator import TranslationEngine

DEFAULT_BASE_URL = "https://translate.googleapis.com"
DEFAULT_TIMEOUT = 30.0


def extract_translated_text(data: Any) -> str:
    """
    拼接 dj=1 响应中 sentences[*].trans 的内容（不加分隔符）。

    响应为空或 sentences 不是列表时返回空字符串。
    """
    if not data or not isinstance(data, dict):
        return ""
    sentences = data.get("sentences")
    if not isinstance(sentences, list):
        return ""
    parts: list[str] = []
    for sentence in sentences:
        if isinstance(sentence, dict) and sentence.get("trans") is not None:
            parts.append(str(sentence["trans"]))
    return "".join(parts)


class GoogleTranslator(TranslationEngine):
    """
    使用 Google 翻译兼容接口（translate_a/single）的翻译引擎。

    默认使用官方接口：
      - https://translate.googleapis.com
    也可通过环境变量自定义：
      - SRT_TRANSLATOR_GOOGLE_TRANSLATE_URL

    代理配置（可选，通过 .env 或环境变量注入）：
      - SRT_TRANSLATOR_HTTP_PROXY
      - SRT_TRANSLATOR_HTTPS_PROXY

    每条字幕单独请求一次，不做合并、重试或限速。
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        env_url = os.getenv("SRT_TRANSLATOR_GOOGLE_TRANSLATE_URL")
        if base_url is not None:
            self.base_url = base_url.rstrip("/")
        elif env_url:
            self.base_url = env_url.rstrip("/")
        else:
            self.base_url = DEFAULT_BASE_URL
        self.timeout = timeout
        self.session = session

        http_proxy = os.getenv("SRT_TRANSLATOR_HTTP_PROXY")
        https_proxy = os.getenv("SRT_TRANSLATOR_HTTPS_PROXY")
        proxies: dict[str, str] = {}
        if http_proxy:
            proxies["http"] = http_proxy
        if https_proxy:
            proxies["https"] = https_proxy
        self.proxies = proxies or None

    def _endpoint(self) -> str:
        return f"{self.base_url}/translate_a/single"

    def _build_params(self, text: str, source_lang: str, target_lang: str) -> dict[str, str]:
        return {
            "client": "gtx",
            "sl": source_lang or AUTO_LANGUAGE,
            "tl": target_lang,
            "dt": "t",
            "dj": "1",
            "source": "input",
            "q": text,
        }

    def translate_text(self, text: str, source_lang: str, target_lang: str) -> str:
        params = self._build_params(text, source_lang, target_lang)
        headers = {
            "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) srt-translator/0.1.0",
        }
        get = self.session.get if self.session is not None else requests.get
        try:
            resp = get(
                self._endpoint(),
                params=params,
                timeout=self.timeout,
                headers=headers,
                proxies=self.proxies,
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            raise TranslationRequestFailed(
                text, source_lang, target_lang, reason=str(exc)
            ) from exc

        if not resp.ok:
            raise TranslationRequestFailed(
                text, source_lang, target_lang, status=resp.status_code, reason=resp.reason
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise TranslationRequestFailed(
                text,
                source_lang,
                target_lang,
                status=resp.status_code,
                reason=f"invalid JSON response: {exc}",
            ) from exc
        return extract_translated_text(data)
