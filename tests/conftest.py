"""Pytest configuration and shared fixtures for the tag parser tests."""
import sys
from pathlib import Path

import pytest

# Add project root to Python path for imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tagparser.aacparser import AacSetup, AacFrameElementParser  # noqa: E402
from tagparser.diagnostics import Diagnostics  # noqa: E402


def bits_to_bytes(*chunks: str) -> bytes:
    """Joins bit strings like "0101" and pads the result with zero bits to whole bytes."""
    bits = ''.join(chunks).replace(' ', '')
    bits += '0' * (-len(bits) % 8)
    return int(bits, 2).to_bytes(len(bits) // 8, 'big') if bits else b''


@pytest.fixture
def bits():
    """Return the bit string to bytes helper."""
    return bits_to_bytes


@pytest.fixture
def lc_setup() -> AacSetup:
    """AAC LC, 44.1 kHz, stereo, 1024 samples per frame."""
    return AacSetup(audio_object_id=2, sampling_frequency_index=4, channel_config=2, frame_length=1024)


@pytest.fixture
def diag() -> Diagnostics:
    return Diagnostics()


@pytest.fixture
def lc_parser(lc_setup, diag) -> AacFrameElementParser:
    return AacFrameElementParser(lc_setup, diag)
