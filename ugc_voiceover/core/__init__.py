"""
Core modules for UGC Voiceover.

Contains the speech post-processing pipeline:
- Base64 PCM decoding
- Time-stretch resampling
- 16-bit quantization
- MP3 frame encoding with a WAV container fallback
"""

from ugc_voiceover.core.buffer import AudioBuffer, EncodedArtifact, QuantizedSamples, MIME_MP3, MIME_WAV
from ugc_voiceover.core.decoder import decode_pcm16_base64, SPEECH_SAMPLE_RATE
from ugc_voiceover.core.resampler import time_stretch, stretched_length
from ugc_voiceover.core.quantizer import quantize
from ugc_voiceover.core.encoders import (
    AudioEncoder,
    Mp3FrameEncoder,
    WavContainerEncoder,
    select_encoder,
)
from ugc_voiceover.core.pipeline import VoiceoverPipeline, render_voiceover

__all__ = [
    # Types
    "AudioBuffer",
    "EncodedArtifact",
    "QuantizedSamples",
    "MIME_MP3",
    "MIME_WAV",
    # Stages
    "decode_pcm16_base64",
    "SPEECH_SAMPLE_RATE",
    "time_stretch",
    "stretched_length",
    "quantize",
    # Encoders
    "AudioEncoder",
    "Mp3FrameEncoder",
    "WavContainerEncoder",
    "select_encoder",
    # Pipeline
    "VoiceoverPipeline",
    "render_voiceover",
]
