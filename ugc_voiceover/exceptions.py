"""
Custom exceptions for UGC Voiceover.
"""


class VoiceoverError(Exception):
    """Base exception for UGC Voiceover."""
    pass


class DecodeError(VoiceoverError):
    """Speech payload is empty, not base64, or not whole 16-bit samples."""
    pass


class EmptyAudioError(VoiceoverError):
    """Time-stretching left no samples to encode."""
    pass


class ConfigurationError(VoiceoverError):
    """Configuration error."""
    pass
