from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Sequence

from tqdm import tqdm

from .config import TranslatorConfig
from .errors import InvalidLanguageCode
from .languages import AUTO_LANGUAGE, is_supported_language
from .subtitles import SubtitleEntry, parse_srt, read_srt, serialize_srt, write_srt
from .translate import TranslationEngine, get_translation_engine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryResult:
    """单条字幕的翻译结果；失败时 entry 为原始字幕。"""

    entry: SubtitleEntry
    ok: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class PipelineResult:
    output_path: Path
    entry_count: int
    failed_count: int
    elapsed: float


def ensure_supported_language(target_lang: str) -> None:
    if not is_supported_language(target_lang):
        raise InvalidLanguageCode(target_lang)


def _translate_one(
    engine: TranslationEngine,
    entry: SubtitleEntry,
    target_lang: str,
) -> EntryResult:
    try:
        translated = engine.translate_text(entry.text, AUTO_LANGUAGE, target_lang)
    except Exception as exc:
        # 单条失败时保留原文，不影响其它字幕
        logger.warning(
            "翻译失败（index=%s, %s --> %s）: %s。该条将保留原文。",
            entry.index,
            entry.start,
            entry.end,
            exc,
        )
        return EntryResult(entry=entry, ok=False, error=str(exc))
    return EntryResult(entry=replace(entry, text=translated), ok=True)


def translate_entries(
    entries: Sequence[SubtitleEntry],
    target_lang: str,
    engine: TranslationEngine,
    max_workers: Optional[int] = None,
    progress: bool = True,
) -> List[EntryResult]:
    """
    并发翻译所有字幕，返回与 entries 一一对应（按原始顺序）的结果列表。

    max_workers 为 None 时每条字幕分配一个线程，即一次性全部发出。
    进度条只在当前线程中更新。
    """
    if not entries:
        return []

    worker_count = len(entries) if max_workers is None else max(1, min(max_workers, len(entries)))
    results: List[Optional[EntryResult]] = [None] * len(entries)

    with tqdm(
        total=len(entries),
        desc=f"翻译 -> {target_lang}",
        unit="条",
        disable=not progress,
    ) as bar:
        with ThreadPoolExecutor(max_workers=worker_count) as executor:
            future_to_pos = {
                executor.submit(_translate_one, engine, entry, target_lang): pos
                for pos, entry in enumerate(entries)
            }
            for future in as_completed(future_to_pos):
                results[future_to_pos[future]] = future.result()
                bar.update(1)

    return [r for r in results if r is not None]


def translate_document(
    content: str,
    target_lang: str,
    engine: Optional[TranslationEngine] = None,
    max_workers: Optional[int] = None,
    progress: bool = True,
) -> str:
    """
    翻译整份 SRT 文本并返回新的 SRT 文本，时间轴保持不变。

    target_lang 不受支持时抛出 InvalidLanguageCode，且不会发起任何请求。
    """
    ensure_supported_language(target_lang)
    entries = parse_srt(content)
    if engine is None:
        engine = get_translation_engine("google")
    results = translate_entries(
        entries,
        target_lang,
        engine,
        max_workers=max_workers,
        progress=progress,
    )
    return serialize_srt(r.entry for r in results)


class SrtTranslationPipeline:
    """
    读取 SRT 文件 -> 并发翻译 -> 写出新的 SRT 文件。

    只有在全部字幕处理完成后才会写出文件。
    """

    def __init__(
        self,
        config: TranslatorConfig,
        engine: Optional[TranslationEngine] = None,
    ) -> None:
        self.config = config
        self.engine = engine

    def _get_engine(self) -> TranslationEngine:
        if self.engine is None:
            self.engine = get_translation_engine("google", timeout=self.config.timeout)
        return self.engine

    def run(self) -> PipelineResult:
        ensure_supported_language(self.config.target_lang)

        started = time.perf_counter()
        entries = read_srt(self.config.input_path)
        logger.info("共 %d 条字幕待翻译", len(entries))

        results = translate_entries(
            entries,
            self.config.target_lang,
            self._get_engine(),
            max_workers=self.config.max_workers,
            progress=self.config.show_progress,
        )
        output_path = write_srt((r.entry for r in results), self.config.output_path)
        elapsed = time.perf_counter() - started

        failed = sum(1 for r in results if not r.ok)
        if failed:
            logger.warning("%d/%d 条字幕翻译失败，已保留原文", failed, len(results))
        return PipelineResult(
            output_path=output_path,
            entry_count=len(results),
            failed_count=failed,
            elapsed=elapsed,
        )
