"""Shared test fixtures for SRT4Whisper."""

import pytest
from pathlib import Path


def pytest_collection_modifyitems(items):
    """Auto-mark tests without integration or slow markers as unit tests."""
    for item in items:
        markers = {marker.name for marker in item.iter_markers()}
        if 'integration' not in markers and 'slow' not in markers:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def tmp_output(tmp_path):
    """Provide a temporary output directory."""
    out = tmp_path / 'output'
    out.mkdir()
    return out


@pytest.fixture
def sample_transcript():
    """Return a small WhisperKit-style transcript."""
    return (
        "Transcript of a test recording\n"
        "[0.000 --> 2.500] Hello world\n"
        "\n"
        "[3.000 --> 5.000]  This is a test \n"
        "[5.500 --> 7.250] Goodbye\n"
    )


@pytest.fixture
def sample_transcript_file(tmp_path, sample_transcript):
    """Create a sample transcript file for testing."""
    path = tmp_path / 'talk.txt'
    path.write_text(sample_transcript, encoding='utf-8')
    return path


@pytest.fixture
def transcript_dir(tmp_path):
    """A folder holding two transcripts, a binary file and a sub-folder."""
    d = tmp_path / 'inputs'
    d.mkdir()
    (d / 'a.txt').write_text("[1.0 --> 2.0] first\n", encoding='utf-8')
    (d / 'b.txt').write_text("[2.0 --> 3.0] second\n[3.0 --> 4.0] third\n", encoding='utf-8')
    (d / 'c.bin').write_bytes(b'\x00\x01')
    nested = d / 'nested'
    nested.mkdir()
    (nested / 'd.txt').write_text("[4.0 --> 5.0] nested\n", encoding='utf-8')
    return d
