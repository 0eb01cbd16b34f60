from __future__ import annotations

from srt_translator.subtitles import SubtitleEntry, parse_srt, read_srt, serialize_srt, write_srt


def test_parse_basic(sample_srt: str) -> None:
    entries = parse_srt(sample_srt)
    assert entries == [
        SubtitleEntry(1, "00:00:01,000", "00:00:02,000", "Hello"),
        SubtitleEntry(2, "00:00:03,000", "00:00:04,000", "World"),
    ]


def test_parse_multiline_text_and_crlf() -> None:
    content = "1\r\n00:00:01,000 --> 00:00:02,500\r\nLine one\r\nLine two\r\n\r\n"
    entries = parse_srt(content)
    assert len(entries) == 1
    assert entries[0].text == "Line one\nLine two"
    assert entries[0].end == "00:00:02,500"


def test_parse_strips_bom_and_whitespace_only_separators() -> None:
    content = "\ufeff1\n00:00:01,000 --> 00:00:02,000\nA\n   \n2\n00:00:03,000 --> 00:00:04,000\nB\n"
    entries = parse_srt(content)
    assert [e.index for e in entries] == [1, 2]
    assert [e.text for e in entries] == ["A", "B"]


def test_parse_skips_malformed_blocks() -> None:
    content = (
        "1\n00:00:01,000 --> 00:00:02,000\nKeep me\n\n"
        "2\n\n"
        "3\n00:00:05,000 --> 00:00:06,000\n\n"
        "x\n00:00:07,000 --> 00:00:08,000\nBad index\n\n"
        "5\nno arrow here\nBad timing\n\n"
        "6\n00:00:09,000 --> 00:00:10,000\nAlso kept\n"
    )
    entries = parse_srt(content)
    assert [e.index for e in entries] == [1, 6]
    assert serialize_srt(entries) == (
        "1\n00:00:01,000 --> 00:00:02,000\nKeep me\n\n"
        "6\n00:00:09,000 --> 00:00:10,000\nAlso kept\n"
    )


def test_parse_keeps_timestamps_verbatim() -> None:
    entries = parse_srt("7\n1:2:3.4-->whatever\nText\n")
    assert entries[0].start == "1:2:3.4"
    assert entries[0].end == "whatever"


def test_parse_empty_document() -> None:
    assert parse_srt("") == []
    assert parse_srt("\n\n  \n") == []


def test_serialize_format(sample_srt: str) -> None:
    entries = [
        SubtitleEntry(1, "00:00:01,000", "00:00:02,000", "Hello"),
        SubtitleEntry(2, "00:00:03,000", "00:00:04,000", "World"),
    ]
    assert serialize_srt(entries) == sample_srt
    assert serialize_srt([]) == ""


def test_reencoding_is_idempotent() -> None:
    entries = [
        SubtitleEntry(3, "00:00:01,000", "00:00:02,000", "First\nsecond line"),
        SubtitleEntry(1, "00:01:00,000", "00:01:02,000", "¿Qué tal?"),
        SubtitleEntry(10, "01:00:00,000", "01:00:05,123", "<i>styled</i>"),
    ]
    encoded = serialize_srt(entries)
    assert parse_srt(encoded) == entries
    assert serialize_srt(parse_srt(encoded)) == encoded


def test_read_write_roundtrip(tmp_path, sample_srt: str) -> None:
    src = tmp_path / "in.srt"
    src.write_text(sample_srt, encoding="utf-8")
    entries = read_srt(src)
    out = write_srt(entries, tmp_path / "nested" / "out.srt")
    assert out.read_text(encoding="utf-8") == sample_srt
