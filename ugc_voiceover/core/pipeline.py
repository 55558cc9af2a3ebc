"""
Voice-over pipeline for UGC Voiceover.

Turns a base64 speech payload into a downloadable audio artifact:
decode -> time-stretch -> quantize -> encode (MP3, or WAV fallback).
"""

from typing import Optional, Union

from ugc_voiceover.config import Config
from ugc_voiceover.core.buffer import AudioBuffer, EncodedArtifact
from ugc_voiceover.core.decoder import decode_pcm16_base64
from ugc_voiceover.core.encoders import ProgressCallback, select_encoder
from ugc_voiceover.core.quantizer import quantize
from ugc_voiceover.core.resampler import time_stretch
from ugc_voiceover.utils.logging import get_logger

logger = get_logger(__name__)


class VoiceoverPipeline:
    """
    Synchronous speech post-processing.

    Each call to process() is independent: the pipeline keeps only its
    configuration, so overlapping calls from different threads or tasks
    do not affect each other.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the pipeline.

        Args:
            config: Settings to use (defaults to Config()).
        """
        self.config = config or Config()
        self.config.validate()

    def process(
        self,
        payload: Union[str, bytes],
        speed: Optional[float] = None,
        output_format: Optional[str] = None,
        progress_callback: Optional[ProgressCallback] = None
    ) -> EncodedArtifact:
        """
        Render a speech payload into an encoded artifact.

        Args:
            payload: Base64 16-bit LE mono PCM from the speech provider.
            speed: Speed factor in [0.5, 2.0] (default from config).
            output_format: "mp3" or "wav" (default from config).
            progress_callback: Optional callback(current, total) per encoded block.

        Returns:
            EncodedArtifact tagged audio/mp3, or audio/wav when MP3
            encoding is unavailable or WAV was requested.

        Raises:
            DecodeError: If the payload cannot be decoded.
            EmptyAudioError: If stretching leaves no samples.
        """
        stretched = self.prepare(payload, speed)
        return self.encode(stretched, output_format, progress_callback=progress_callback)

    def prepare(self, payload: Union[str, bytes], speed: Optional[float] = None) -> AudioBuffer:
        """
        Decode a payload and apply the speed factor.

        Returns:
            The time-stretched AudioBuffer, ready for encoding.
        """
        if speed is None:
            speed = self.config.audio.default_speed

        decoded = decode_pcm16_base64(payload, sample_rate=self.config.audio.sample_rate)
        stretched = time_stretch(decoded, speed)
        logger.debug(
            "Pipeline: %d decoded -> %d stretched samples (speed %.2f)",
            decoded.num_samples, stretched.num_samples, speed
        )
        return stretched

    def encode(
        self,
        buffer: AudioBuffer,
        output_format: Optional[str] = None,
        progress_callback: Optional[ProgressCallback] = None
    ) -> EncodedArtifact:
        """
        Quantize a buffer and encode it with the encoder chosen for this call.

        Returns:
            EncodedArtifact tagged with the MIME type of the encoder used.
        """
        encoder_cfg = self.config.encoder
        if output_format is None:
            output_format = encoder_cfg.output_format

        samples = quantize(buffer)
        encoder = select_encoder(
            output_format,
            bitrate_kbps=encoder_cfg.bitrate_kbps,
            block_size=encoder_cfg.block_size,
            quality=encoder_cfg.quality,
        )
        logger.info("Encoding %.2fs of audio with %s", buffer.duration_seconds, encoder.__class__.__name__)

        data = encoder.encode(samples, buffer.sample_rate, progress_callback=progress_callback)
        return EncodedArtifact(data=data, mime_type=encoder.mime_type)


def render_voiceover(
    payload: Union[str, bytes],
    speed: float = 1.0,
    output_format: str = "mp3",
    config: Optional[Config] = None
) -> EncodedArtifact:
    """Run the voice-over pipeline once with the given settings."""
    return VoiceoverPipeline(config).process(payload, speed=speed, output_format=output_format)
