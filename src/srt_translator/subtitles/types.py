from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SubtitleEntry:
    """
    单条字幕，对应 SRT 中的一个时间轴块。

    start / end 保留原始时间戳字符串，不做解析。
    """

    index: int
    start: str
    end: str
    text: str
