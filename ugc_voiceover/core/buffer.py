"""
Audio value types passed between pipeline stages.

Every stage returns a new object. Sample arrays are read-only.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np

from ugc_voiceover.utils.file_utils import ensure_parent_exists
from ugc_voiceover.utils.slug import voiceover_filename

# 16-bit signed samples, one per AudioBuffer sample.
QuantizedSamples = np.ndarray

MIME_MP3 = "audio/mp3"
MIME_WAV = "audio/wav"

_EXTENSIONS = {
    MIME_MP3: "mp3",
    MIME_WAV: "wav",
}


@dataclass(frozen=True, eq=False)
class AudioBuffer:
    """Normalized mono float samples in [-1.0, 1.0] at a known sample rate."""

    samples: np.ndarray
    sample_rate: int
    channels: int = 1

    def __post_init__(self):
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        if self.channels != 1:
            raise ValueError("AudioBuffer is mono only")
        samples = np.array(self.samples, dtype=np.float32)
        if samples.ndim != 1:
            raise ValueError("AudioBuffer samples must be one-dimensional")
        samples.setflags(write=False)
        object.__setattr__(self, "samples", samples)

    def __len__(self) -> int:
        return self.num_samples

    @property
    def num_samples(self) -> int:
        return int(self.samples.shape[0])

    @property
    def duration_seconds(self) -> float:
        return self.num_samples / self.sample_rate


@dataclass(frozen=True)
class EncodedArtifact:
    """Final encoded voice-over bytes tagged with their MIME type."""

    data: bytes
    mime_type: str

    def __post_init__(self):
        if self.mime_type not in _EXTENSIONS:
            raise ValueError(f"unsupported MIME type: {self.mime_type!r}")

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self.mime_type]

    @property
    def size(self) -> int:
        return len(self.data)

    def suggested_filename(self, voice_label: str) -> str:
        """Download name, e.g. ``ugc-voiceover-warm-narrator.mp3``."""
        return voiceover_filename(voice_label, self.extension)

    def save(self, path: Union[str, Path]) -> Path:
        """
        Write the artifact bytes to disk.

        Args:
            path: Destination file path. Parent directories are created.

        Returns:
            The path written.
        """
        path = ensure_parent_exists(Path(path))
        path.write_bytes(self.data)
        return path
