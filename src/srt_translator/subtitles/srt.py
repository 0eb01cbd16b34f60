from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List

from .types import SubtitleEntry

logger = logging.getLogger(__name__)

TIMING_SEPARATOR = "-->"

# 仅包含空白字符的行也视为块分隔
_BLOCK_SPLIT_RE = re.compile(r"\n[ \t]*\n")


def _parse_block(block: str) -> SubtitleEntry | None:
    lines = block.split("\n")
    if len(lines) < 3:
        return None
    try:
        index = int(lines[0].strip())
    except ValueError:
        return None
    if TIMING_SEPARATOR not in lines[1]:
        return None
    start, end = lines[1].split(TIMING_SEPARATOR, 1)
    return SubtitleEntry(
        index=index,
        start=start.strip(),
        end=end.strip(),
        text="\n".join(lines[2:]),
    )


def parse_srt(content: str) -> List[SubtitleEntry]:
    """
    将 SRT 文本解析为按原始顺序排列的字幕列表。

    不满足「序号行 + 时间轴行 + 至少一行文本」的块会被直接跳过。
    """
    normalized = content.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    entries: List[SubtitleEntry] = []
    for block in _BLOCK_SPLIT_RE.split(normalized.strip()):
        block = block.strip("\n")
        if not block.strip():
            continue
        entry = _parse_block(block)
        if entry is None:
            logger.debug("跳过格式不完整的字幕块: %r", block)
            continue
        entries.append(entry)
    return entries


def serialize_srt(entries: Iterable[SubtitleEntry]) -> str:
    blocks: list[str] = []
    for entry in entries:
        blocks.append(
            f"{entry.index}\n{entry.start} {TIMING_SEPARATOR} {entry.end}\n{entry.text}\n"
        )
    return "\n".join(blocks)


def read_srt(path: str | Path) -> List[SubtitleEntry]:
    in_path = Path(path).expanduser().resolve()
    return parse_srt(in_path.read_text(encoding="utf-8"))


def write_srt(entries: Iterable[SubtitleEntry], path: str | Path) -> Path:
    out_path = Path(path).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(serialize_srt(entries), encoding="utf-8")
    return out_path
