"""Tests for srt4whisper.srt module."""

import pytest

from srt4whisper.exceptions import FileReadError
from srt4whisper.srt import (
    CueCandidate, SRTEntry, convert, convert_file, convert_to_entries,
    parse_line, render_entries,
)


class TestParseLine:
    def test_basic(self):
        assert parse_line('[1.0 --> 2.0] hello') == CueCandidate(1.0, 2.0, 'hello')

    def test_no_arrow_ignored(self):
        assert parse_line('just some commentary') is None
        assert parse_line('') is None

    def test_unparseable_start_coerced(self):
        cue = parse_line('[abc --> 2.0] x')
        assert cue.start == 0.0
        assert cue.end == 2.0
        assert cue.text == 'x'

    def test_underscore_digits_not_decimal(self):
        cue = parse_line('[1_5 --> 2.0] x')
        assert cue == CueCandidate(0.0, 2.0, 'x')

    def test_missing_closing_bracket(self):
        assert parse_line('[1.0 --> 2.0 hello') is None

    def test_nothing_after_bracket(self):
        assert parse_line('[1.0 --> 2.0]') is None

    def test_whitespace_caption_is_empty_cue(self):
        cue = parse_line('[1.0 --> 2.0]   ')
        assert cue is not None
        assert cue.text == ''

    def test_arrow_without_spaces_ignored(self):
        assert parse_line('[1.0-->2.0] tight') is None

    def test_three_times_ignored(self):
        assert parse_line('[1.0 --> 2.0 --> 3.0] x') is None

    def test_caption_truncated_at_bracket(self):
        cue = parse_line('[1.0 --> 2.0] see [note] here')
        assert cue.text == 'see [note'

    def test_caption_trimmed(self):
        assert parse_line('[0.5 --> 1.5]   padded  \r').text == 'padded'

    def test_missing_opening_bracket_tolerated(self):
        assert parse_line('1.0 --> 2.0] hi') == CueCandidate(1.0, 2.0, 'hi')


class TestSRTEntry:
    def test_to_srt(self):
        entry = SRTEntry(index=3, start=61.5, end=62.0, text='Hi')
        assert entry.to_srt() == '3\n00:01:01,500 --> 00:01:02,000\nHi\n'

    def test_times(self):
        entry = SRTEntry(index=1, start=0.0, end=3661.5, text='')
        assert entry.start_time == '00:00:00,000'
        assert entry.end_time == '01:01:01,500'


class TestConvert:
    def test_no_cue_lines_gives_empty(self):
        assert convert('hello\nworld\n\n') == ''
        assert convert('') == ''

    def test_sample(self, sample_transcript):
        expected = (
            "1\n00:00:00,000 --> 00:00:02,500\nHello world\n\n"
            "2\n00:00:03,000 --> 00:00:05,000\nThis is a test\n\n"
            "3\n00:00:05,500 --> 00:00:07,250\nGoodbye\n"
        )
        assert convert(sample_transcript) == expected

    def test_indices_contiguous(self):
        doc = '\n'.join(f'[{i}.0 --> {i}.5] line {i}' for i in range(10))
        entries = convert_to_entries(doc)
        assert [e.index for e in entries] == list(range(1, 11))
        assert [e.text for e in entries] == [f'line {i}' for i in range(10)]

    def test_malformed_lines_skipped_without_gaps(self):
        doc = "[1.0 --> 2.0] one\n[broken --> \n[3.0 --> 4.0] two\n"
        entries = convert_to_entries(doc)
        assert [(e.index, e.text) for e in entries] == [(1, 'one'), (2, 'two')]

    def test_deterministic(self, sample_transcript):
        assert convert(sample_transcript) == convert(sample_transcript)

    def test_crlf_captions_clean(self):
        assert convert('[1.0 --> 2.0] hi\r\n') == '1\n00:00:01,000 --> 00:00:02,000\nhi\n'

    def test_render_empty(self):
        assert render_entries([]) == ''


class TestConvertFile:
    def test_reads_and_converts(self, sample_transcript_file, sample_transcript):
        assert convert_file(sample_transcript_file) == convert(sample_transcript)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileReadError):
            convert_file(tmp_path / 'missing.txt')
