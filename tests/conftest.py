"""Shared pytest fixtures for UGC Voiceover tests."""

import base64

import numpy as np
import pytest

from ugc_voiceover.core.buffer import AudioBuffer


def encode_pcm(values) -> str:
    """Base64 payload for a sequence of int16 sample values."""
    pcm = np.asarray(values, dtype="<i2")
    return base64.b64encode(pcm.tobytes()).decode("ascii")


@pytest.fixture
def pcm_payload():
    """Factory returning base64 PCM for the given int16 values."""
    return encode_pcm


@pytest.fixture
def silent_payload():
    """Two seconds of silence at 24 kHz."""
    return encode_pcm(np.zeros(48000, dtype=np.int16))


@pytest.fixture
def ramp_buffer():
    """One second ramp from -1.0 to 1.0 at 24 kHz."""
    return AudioBuffer(samples=np.linspace(-1.0, 1.0, 24000), sample_rate=24000)


@pytest.fixture
def no_lameenc(monkeypatch):
    """Make the MP3 encoder report itself as unavailable."""
    from ugc_voiceover.core.encoders import Mp3FrameEncoder

    monkeypatch.setattr(Mp3FrameEncoder, "is_available", classmethod(lambda cls: False))
