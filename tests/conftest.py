from __future__ import annotations

import threading
from typing import Callable

import pytest

from srt_translator.errors import TranslationRequestFailed
from srt_translator.translate import TranslationEngine


SAMPLE_SRT = (
    "1\n00:00:01,000 --> 00:00:02,000\nHello\n\n"
    "2\n00:00:03,000 --> 00:00:04,000\nWorld\n"
)


class FakeEngine(TranslationEngine):
    """按给定函数翻译，并记录每次调用。"""

    def __init__(self, func: Callable[[str], str] = str.upper, fail_on: set[str] | None = None) -> None:
        self.func = func
        self.fail_on = fail_on or set()
        self.calls: list[tuple[str, str, str]] = []
        self._lock = threading.Lock()

    def translate_text(self, text: str, source_lang: str, target_lang: str) -> str:
        with self._lock:
            self.calls.append((text, source_lang, target_lang))
        if text in self.fail_on:
            raise TranslationRequestFailed(text, source_lang, target_lang, status=500, reason="Internal Server Error")
        return self.func(text)


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, reason: str = "OK", raw: str | None = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self.reason = reason
        self._raw = raw

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._raw is not None:
            raise ValueError(f"Expecting value: {self._raw!r}")
        return self._payload


@pytest.fixture
def sample_srt() -> str:
    return SAMPLE_SRT


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SRT_TRANSLATOR_CONCURRENCY",
        "SRT_TRANSLATOR_TIMEOUT",
        "SRT_TRANSLATOR_GOOGLE_TRANSLATE_URL",
        "SRT_TRANSLATOR_HTTP_PROXY",
        "SRT_TRANSLATOR_HTTPS_PROXY",
    ):
        monkeypatch.delenv(name, raising=False)
