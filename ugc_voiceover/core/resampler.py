"""
Time-stretch resampler.

Changes duration by reading the source at ``speed`` samples per output
sample, the same way a player changes playback rate. Pitch moves with
speed; the sample rate tag is kept as-is.
"""

import math

import numpy as np

from ugc_voiceover.core.buffer import AudioBuffer
from ugc_voiceover.exceptions import EmptyAudioError
from ugc_voiceover.utils.logging import get_logger

logger = get_logger(__name__)


def stretched_length(num_samples: int, speed: float) -> int:
    """Output sample count for a stretch: ceil(num_samples / speed)."""
    if speed <= 0:
        raise ValueError(f"speed must be positive, got {speed}")
    return math.ceil(num_samples / speed)


def time_stretch(buffer: AudioBuffer, speed: float) -> AudioBuffer:
    """
    Resample a buffer along a compressed or expanded time axis.

    Output sample ``i`` is read at source position ``i * speed`` with
    linear interpolation between the two neighbouring source samples;
    reads past the last sample hold the last value.

    Args:
        buffer: Source audio.
        speed: Playback speed, 1.0 = unchanged, 2.0 = half as long.

    Returns:
        New AudioBuffer of ceil(len(buffer) / speed) samples at the
        same sample rate. At speed 1.0 the samples are identical.

    Raises:
        EmptyAudioError: If the stretched buffer would have no samples.
        ValueError: If speed is not positive.
    """
    n_in = buffer.num_samples
    n_out = stretched_length(n_in, speed)
    if n_out == 0:
        raise EmptyAudioError(
            f"stretching {n_in} samples at speed {speed} leaves no audio"
        )

    if speed == 1.0:
        return AudioBuffer(samples=buffer.samples, sample_rate=buffer.sample_rate)

    positions = np.arange(n_out, dtype=np.float64) * float(speed)
    source_index = np.arange(n_in, dtype=np.float64)
    samples = np.interp(positions, source_index, buffer.samples.astype(np.float64))

    logger.debug("Stretched %d samples to %d at speed %.2f", n_in, n_out, speed)
    return AudioBuffer(samples=samples.astype(np.float32), sample_rate=buffer.sample_rate)
