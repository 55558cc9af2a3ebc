"""
Sample decoder for synthesized speech payloads.

The speech provider returns base64 text wrapping raw 16-bit signed
little-endian mono PCM at 24 kHz, with no container header.
"""

import base64
import binascii
import re
from typing import Union

import numpy as np

from ugc_voiceover.core.buffer import AudioBuffer
from ugc_voiceover.exceptions import DecodeError
from ugc_voiceover.utils.logging import get_logger

logger = get_logger(__name__)

SPEECH_SAMPLE_RATE = 24000
PCM16_SCALE = 32768.0

_DATA_URL_PREFIX = re.compile(rb"^data:[^,]*;base64,", re.IGNORECASE)
_WHITESPACE = re.compile(rb"\s+")


def _strip_payload(payload: Union[str, bytes]) -> bytes:
    if isinstance(payload, str):
        try:
            payload = payload.encode("ascii")
        except UnicodeEncodeError as e:
            raise DecodeError("speech payload contains non-ASCII characters") from e
    elif not isinstance(payload, (bytes, bytearray, memoryview)):
        raise DecodeError(f"speech payload must be str or bytes, got {type(payload).__name__}")

    payload = bytes(payload).strip()
    # Accept "data:audio/...;base64,<data>" URLs as produced by browser readers
    match = _DATA_URL_PREFIX.match(payload)
    if match:
        payload = payload[match.end():]
    # base64 tools wrap lines at 76 columns
    return _WHITESPACE.sub(b"", payload)


def decode_pcm16_base64(
    payload: Union[str, bytes],
    sample_rate: int = SPEECH_SAMPLE_RATE
) -> AudioBuffer:
    """
    Decode a base64 PCM payload into a normalized mono AudioBuffer.

    Every pair of bytes is read as a signed little-endian 16-bit integer
    and divided by 32768.0, so values land in [-1.0, 1.0).

    Args:
        payload: Base64 text (or its ASCII bytes), optionally a data URL.
        sample_rate: Rate the provider synthesized at.

    Returns:
        AudioBuffer with len(raw_bytes) // 2 samples.

    Raises:
        DecodeError: If the payload is empty, not valid base64, or
            decodes to an odd number of bytes.
    """
    data = _strip_payload(payload)
    if not data:
        raise DecodeError("speech payload is empty")

    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"speech payload is not valid base64: {e}") from e

    if not raw:
        raise DecodeError("speech payload decodes to zero bytes")
    if len(raw) % 2:
        raise DecodeError(
            f"speech payload has {len(raw)} bytes, not a whole number of 16-bit samples"
        )

    pcm = np.frombuffer(raw, dtype="<i2")
    samples = pcm.astype(np.float32) / PCM16_SCALE

    logger.debug("Decoded %d bytes into %d samples at %d Hz", len(raw), len(samples), sample_rate)
    return AudioBuffer(samples=samples, sample_rate=sample_rate)
