"""
Configuration and paths for UGC Voiceover.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import json

from ugc_voiceover.exceptions import ConfigurationError

# LAME works on granules of 576 samples; blocks must be whole multiples.
FRAME_GRANULE = 576

OUTPUT_FORMATS = ("mp3", "wav")


@dataclass
class AudioConfig:
    """Speech input and speed settings."""
    sample_rate: int = 24000  # Upstream TTS output rate
    channels: int = 1  # Mono
    default_speed: float = 1.0
    min_speed: float = 0.5
    max_speed: float = 2.0
    speed_step: float = 0.1


@dataclass
class EncoderConfig:
    """Compressed output settings."""
    output_format: str = "mp3"  # mp3, wav
    bitrate_kbps: int = 128
    block_size: int = 1152
    quality: int = 2  # LAME algorithm quality, 2 = high, 7 = fast


@dataclass
class Config:
    """Main configuration for UGC Voiceover."""

    output_dir: Path = field(default_factory=lambda: Path.home() / "Music" / "voiceovers")

    # Sub-configurations
    audio: AudioConfig = field(default_factory=AudioConfig)
    encoder: EncoderConfig = field(default_factory=EncoderConfig)

    @property
    def settings_file(self) -> Path:
        return self.output_dir / "settings.json"

    def _check_types(self) -> None:
        int_fields = {
            "audio.sample_rate": self.audio.sample_rate,
            "audio.channels": self.audio.channels,
            "encoder.bitrate_kbps": self.encoder.bitrate_kbps,
            "encoder.block_size": self.encoder.block_size,
            "encoder.quality": self.encoder.quality,
        }
        float_fields = {
            "audio.default_speed": self.audio.default_speed,
            "audio.min_speed": self.audio.min_speed,
            "audio.max_speed": self.audio.max_speed,
            "audio.speed_step": self.audio.speed_step,
        }
        for name, value in int_fields.items():
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        for name, value in float_fields.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
        if not isinstance(self.encoder.output_format, str):
            raise ConfigurationError(
                f"encoder.output_format must be a string, got {self.encoder.output_format!r}"
            )

    def validate(self) -> None:
        """Raise ConfigurationError if any setting is unusable."""
        self._check_types()
        if self.audio.sample_rate <= 0:
            raise ConfigurationError(f"sample_rate must be positive, got {self.audio.sample_rate}")
        if self.audio.channels != 1:
            raise ConfigurationError("only mono audio is supported")
        if not 0 < self.audio.min_speed <= self.audio.max_speed:
            raise ConfigurationError(
                f"invalid speed range [{self.audio.min_speed}, {self.audio.max_speed}]"
            )
        if not self.audio.min_speed <= self.audio.default_speed <= self.audio.max_speed:
            raise ConfigurationError(f"default_speed {self.audio.default_speed} is out of range")
        if self.encoder.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(f"unknown output format: {self.encoder.output_format!r}")
        if self.encoder.bitrate_kbps <= 0:
            raise ConfigurationError(f"bitrate_kbps must be positive, got {self.encoder.bitrate_kbps}")
        if self.encoder.block_size <= 0 or self.encoder.block_size % FRAME_GRANULE:
            raise ConfigurationError(
                f"block_size must be a positive multiple of {FRAME_GRANULE}, "
                f"got {self.encoder.block_size}"
            )

    def clamp_speed(self, speed: float) -> float:
        """Snap a speed value onto the slider grid and into the allowed range."""
        speed = min(max(float(speed), self.audio.min_speed), self.audio.max_speed)
        steps = round((speed - self.audio.min_speed) / self.audio.speed_step)
        return round(self.audio.min_speed + steps * self.audio.speed_step, 2)

    def save(self, settings_file: Optional[Path] = None) -> None:
        """Save configuration to settings file."""
        if settings_file is None:
            settings_file = self.settings_file
        settings_file = Path(settings_file)
        settings_file.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "output_dir": str(self.output_dir),
            "audio": {
                "sample_rate": self.audio.sample_rate,
                "channels": self.audio.channels,
                "default_speed": self.audio.default_speed,
                "min_speed": self.audio.min_speed,
                "max_speed": self.audio.max_speed,
                "speed_step": self.audio.speed_step,
            },
            "encoder": {
                "output_format": self.encoder.output_format,
                "bitrate_kbps": self.encoder.bitrate_kbps,
                "block_size": self.encoder.block_size,
                "quality": self.encoder.quality,
            },
        }
        with open(settings_file, "w") as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load(cls, settings_file: Optional[Path] = None) -> "Config":
        """Load configuration from settings file."""
        config = cls()

        if settings_file is None:
            settings_file = config.settings_file
        settings_file = Path(settings_file)

        if settings_file.exists():
            try:
                with open(settings_file) as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"cannot parse {settings_file}: {e}") from e

            if not isinstance(data, dict):
                raise ConfigurationError(f"{settings_file} must hold a JSON object")
            for section in ("audio", "encoder"):
                if section in data and not isinstance(data[section], dict):
                    raise ConfigurationError(f"\"{section}\" in {settings_file} must be an object")

            if "output_dir" in data:
                if not isinstance(data["output_dir"], str):
                    raise ConfigurationError(f"output_dir must be a string, got {data['output_dir']!r}")
                config.output_dir = Path(data["output_dir"]).expanduser()

            if "audio" in data:
                audio = data["audio"]
                config.audio = AudioConfig(
                    sample_rate=audio.get("sample_rate", 24000),
                    channels=audio.get("channels", 1),
                    default_speed=audio.get("default_speed", 1.0),
                    min_speed=audio.get("min_speed", 0.5),
                    max_speed=audio.get("max_speed", 2.0),
                    speed_step=audio.get("speed_step", 0.1),
                )

            if "encoder" in data:
                encoder = data["encoder"]
                config.encoder = EncoderConfig(
                    output_format=encoder.get("output_format", "mp3"),
                    bitrate_kbps=encoder.get("bitrate_kbps", 128),
                    block_size=encoder.get("block_size", 1152),
                    quality=encoder.get("quality", 2),
                )

        config.validate()
        return config


# Default configuration instance
default_config = Config()
