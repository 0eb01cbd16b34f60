from __future__ import annotations

from .types import SubtitleEntry
from .srt import parse_srt, read_srt, serialize_srt, write_srt

__all__ = ["SubtitleEntry", "parse_srt", "serialize_srt", "read_srt", "write_srt"]
