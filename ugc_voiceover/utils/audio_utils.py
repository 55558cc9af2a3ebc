"""
Audio metering helpers for UGC Voiceover.
"""

import numpy as np


def calculate_db_level(audio_data: np.ndarray) -> float:
    """
    Calculate the dB level of audio data.

    Args:
        audio_data: Normalized audio samples as numpy array.

    Returns:
        RMS level in dB (relative to full scale).
    """
    if len(audio_data) == 0:
        return -np.inf

    rms = np.sqrt(np.mean(audio_data.astype(np.float64) ** 2))

    if rms == 0:
        return -np.inf

    return float(20 * np.log10(rms))


def peak_level(audio_data: np.ndarray) -> float:
    """Largest absolute sample value, 0.0 for empty input."""
    if len(audio_data) == 0:
        return 0.0
    return float(np.max(np.abs(audio_data)))


def format_duration(seconds: float) -> str:
    """
    Format duration as HH:MM:SS or MM:SS.

    Args:
        seconds: Duration in seconds.

    Returns:
        Formatted string.
    """
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    else:
        return f"{minutes}:{secs:02d}"
