from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from .translate.google_translator import DEFAULT_TIMEOUT


@dataclass
class TranslatorConfig:
    """
    一次 SRT 翻译任务的配置。

    max_workers 为 None 时每条字幕一个线程（不限制并发）。
    """

    input_path: Path
    output_path: Path
    target_lang: str
    max_workers: Optional[int] = None
    timeout: float = DEFAULT_TIMEOUT
    show_progress: bool = True

    @classmethod
    def from_paths(
        cls,
        input_path: str | Path,
        target_lang: str,
        output_path: Optional[str | Path] = None,
        max_workers: Optional[int] = None,
        timeout: Optional[float] = None,
        show_progress: bool = True,
    ) -> "TranslatorConfig":
        input_path_obj = Path(input_path).expanduser().resolve()
        if output_path is not None:
            output_path_obj = Path(output_path).expanduser().resolve()
        else:
            # movie.srt -> movie.fr.srt
            output_path_obj = input_path_obj.with_name(
                f"{input_path_obj.stem}.{target_lang}{input_path_obj.suffix}"
            )

        # 从环境变量中读取默认并发数（未显式传入时）
        if max_workers is None:
            env_value = os.getenv("SRT_TRANSLATOR_CONCURRENCY", "").strip()
            try:
                max_workers_value: Optional[int] = int(env_value) if env_value else None
            except ValueError:
                max_workers_value = None
        else:
            max_workers_value = max_workers
        if max_workers_value is not None and max_workers_value < 1:
            max_workers_value = None

        if timeout is None:
            env_timeout = os.getenv("SRT_TRANSLATOR_TIMEOUT", str(DEFAULT_TIMEOUT))
            try:
                timeout_value = float(env_timeout)
            except ValueError:
                timeout_value = DEFAULT_TIMEOUT
        else:
            timeout_value = timeout

        return cls(
            input_path=input_path_obj,
            output_path=output_path_obj,
            target_lang=target_lang,
            max_workers=max_workers_value,
            timeout=timeout_value,
            show_progress=show_progress,
        )
