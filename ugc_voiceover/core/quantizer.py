"""
Float to 16-bit PCM quantizer.
"""

import numpy as np

from ugc_voiceover.core.buffer import AudioBuffer, QuantizedSamples

PCM16_MAX = 32767


def quantize(buffer: AudioBuffer) -> QuantizedSamples:
    """
    Convert normalized float samples to signed 16-bit integers.

    Each sample is clamped to [-1.0, 1.0] and scaled by 32767, then
    rounded half-to-even. Out-of-range input saturates silently.

    Returns:
        int16 array with one value per input sample; empty input gives
        an empty array.
    """
    clamped = np.clip(buffer.samples.astype(np.float64), -1.0, 1.0)
    quantized = np.round(clamped * PCM16_MAX).astype(np.int16)
    quantized.setflags(write=False)
    return quantized
