"""
UGC Voiceover

Post-processing for AI-generated marketing voice-overs: decodes raw
synthesized speech, applies the chosen speed, and encodes a downloadable
MP3 (or WAV when no MP3 encoder is installed).
"""

__version__ = "0.1.0"
__author__ = "UGC Voiceover"

from ugc_voiceover.config import Config
from ugc_voiceover.core.buffer import AudioBuffer, EncodedArtifact
from ugc_voiceover.core.pipeline import VoiceoverPipeline, render_voiceover
from ugc_voiceover.exceptions import VoiceoverError, DecodeError, EmptyAudioError

__all__ = [
    "Config",
    "AudioBuffer",
    "EncodedArtifact",
    "VoiceoverPipeline",
    "render_voiceover",
    "VoiceoverError",
    "DecodeError",
    "EmptyAudioError",
]
