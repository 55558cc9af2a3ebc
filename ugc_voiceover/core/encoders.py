"""
Output encoders for quantized voice-over audio.

Two strategies share one interface:
- Mp3FrameEncoder: lossy MP3 through LAME (lameenc), block by block
- WavContainerEncoder: uncompressed 16-bit PCM WAV through soundfile, always available

select_encoder() picks one per pipeline invocation.
"""

import importlib.util
import io
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

import numpy as np
import soundfile as sf

from ugc_voiceover.core.buffer import MIME_MP3, MIME_WAV, QuantizedSamples
from ugc_voiceover.utils.logging import get_logger

logger = get_logger(__name__)

FRAME_BLOCK_SIZE = 1152
DEFAULT_BITRATE_KBPS = 128
WAV_HEADER_SIZE = 44

ProgressCallback = Callable[[int, int], None]


def _pcm16_bytes(samples: QuantizedSamples) -> bytes:
    return np.ascontiguousarray(samples, dtype="<i2").tobytes()


class AudioEncoder(ABC):
    """
    Abstract base class for output encoders.

    Subclasses must implement:
    - encode(): turn quantized samples into file bytes
    - is_available(): report whether the encoder can run here
    """

    mime_type: str = ""
    extension: str = ""

    @classmethod
    @abstractmethod
    def is_available(cls) -> bool:
        """Check if the encoder's backing library can be used."""
        pass

    @abstractmethod
    def encode(
        self,
        samples: QuantizedSamples,
        sample_rate: int,
        progress_callback: Optional[ProgressCallback] = None
    ) -> bytes:
        """
        Encode mono 16-bit samples.

        Args:
            samples: Quantized samples.
            sample_rate: Sample rate in Hz.
            progress_callback: Optional callback(current, total).

        Returns:
            Complete encoded file bytes.
        """
        pass

    def get_info(self) -> dict:
        return {
            "encoder": self.__class__.__name__,
            "mime_type": self.mime_type,
            "extension": self.extension,
            "available": self.is_available(),
        }


class Mp3FrameEncoder(AudioEncoder):
    """
    Constant bitrate MP3 encoder.

    Samples are fed to LAME in fixed blocks of 1152 (a multiple of its
    576-sample granule) and the encoder is flushed at the end.
    The output is the concatenation of every chunk LAME returns, in
    block order.
    """

    mime_type = MIME_MP3
    extension = "mp3"

    def __init__(
        self,
        bitrate_kbps: int = DEFAULT_BITRATE_KBPS,
        block_size: int = FRAME_BLOCK_SIZE,
        quality: int = 2
    ):
        """
        Initialize the MP3 encoder.

        Args:
            bitrate_kbps: Constant bitrate in kbit/s.
            block_size: Samples per encode call.
            quality: LAME algorithm quality (2 = high, 7 = fast).
        """
        self.bitrate_kbps = bitrate_kbps
        self.block_size = block_size
        self.quality = quality

    @classmethod
    def is_available(cls) -> bool:
        return importlib.util.find_spec("lameenc") is not None

    def _create_encoder(self, sample_rate: int):
        import lameenc

        encoder = lameenc.Encoder()
        encoder.set_bit_rate(self.bitrate_kbps)
        encoder.set_in_sample_rate(sample_rate)
        encoder.set_channels(1)
        encoder.set_quality(self.quality)
        return encoder

    def encode(
        self,
        samples: QuantizedSamples,
        sample_rate: int,
        progress_callback: Optional[ProgressCallback] = None
    ) -> bytes:
        encoder = self._create_encoder(sample_rate)

        total_blocks = -(-len(samples) // self.block_size)
        chunks: List[bytes] = []

        for index, start in enumerate(range(0, len(samples), self.block_size)):
            block = samples[start:start + self.block_size]
            chunks.append(bytes(encoder.encode(_pcm16_bytes(block))))
            if progress_callback:
                progress_callback(index + 1, total_blocks)

        chunks.append(bytes(encoder.flush()))

        data = b"".join(chunks)
        logger.debug(
            "Encoded %d samples in %d blocks to %d MP3 bytes",
            len(samples), total_blocks, len(data)
        )
        return data


class WavContainerEncoder(AudioEncoder):
    """
    Uncompressed RIFF/WAVE writer.

    Produces a 44-byte PCM header (mono, 16 bits, byte rate = 2 x rate,
    block align 2) followed by the little-endian samples.
    """

    mime_type = MIME_WAV
    extension = "wav"

    @classmethod
    def is_available(cls) -> bool:
        return True

    def encode(
        self,
        samples: QuantizedSamples,
        sample_rate: int,
        progress_callback: Optional[ProgressCallback] = None
    ) -> bytes:
        buffer = io.BytesIO()
        sf.write(
            buffer,
            np.asarray(samples, dtype=np.int16),
            int(sample_rate),
            format="WAV",
            subtype="PCM_16",
        )

        if progress_callback:
            progress_callback(1, 1)

        return buffer.getvalue()


def select_encoder(
    output_format: str = "mp3",
    bitrate_kbps: int = DEFAULT_BITRATE_KBPS,
    block_size: int = FRAME_BLOCK_SIZE,
    quality: int = 2
) -> AudioEncoder:
    """
    Choose the encoder for one invocation.

    "mp3" returns an Mp3FrameEncoder when lameenc is installed and a
    WavContainerEncoder otherwise. "wav" always returns the WAV encoder.

    Raises:
        ValueError: For any other output format.
    """
    if output_format == "wav":
        return WavContainerEncoder()

    if output_format != "mp3":
        raise ValueError(f"unknown output format: {output_format!r}")

    if Mp3FrameEncoder.is_available():
        return Mp3FrameEncoder(bitrate_kbps=bitrate_kbps, block_size=block_size, quality=quality)

    logger.warning("lameenc is not installed; writing uncompressed WAV instead of MP3")
    return WavContainerEncoder()
