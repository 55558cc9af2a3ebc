import json

import pytest

from ugc_voiceover.config import Config
from ugc_voiceover.exceptions import ConfigurationError


def test_defaults_match_speech_provider():
    config = Config()

    assert config.audio.sample_rate == 24000
    assert config.audio.channels == 1
    assert config.encoder.bitrate_kbps == 128
    assert config.encoder.block_size == 1152
    assert config.encoder.output_format == "mp3"
    config.validate()


def test_save_and_load_round_trip(tmp_path):
    config = Config(output_dir=tmp_path / "vo")
    config.audio.default_speed = 1.3
    config.encoder.output_format = "wav"
    config.encoder.bitrate_kbps = 96
    path = tmp_path / "settings.json"

    config.save(path)
    loaded = Config.load(path)

    assert loaded.output_dir == tmp_path / "vo"
    assert loaded.audio.default_speed == 1.3
    assert loaded.encoder.output_format == "wav"
    assert loaded.encoder.bitrate_kbps == 96


def test_missing_keys_use_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"encoder": {"bitrate_kbps": 160}}))

    loaded = Config.load(path)

    assert loaded.encoder.bitrate_kbps == 160
    assert loaded.encoder.block_size == 1152
    assert loaded.audio.sample_rate == 24000


def test_missing_file_gives_defaults(tmp_path):
    loaded = Config.load(tmp_path / "absent.json")

    assert loaded.encoder.output_format == "mp3"


def test_unparseable_file_is_a_configuration_error(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")

    with pytest.raises(ConfigurationError):
        Config.load(path)


@pytest.mark.parametrize(
    "section, key, value",
    [
        ("encoder", "block_size", 1000),
        ("encoder", "block_size", 0),
        ("encoder", "output_format", "ogg"),
        ("encoder", "bitrate_kbps", 0),
        ("audio", "sample_rate", 0),
        ("audio", "channels", 2),
        ("audio", "default_speed", 3.0),
        ("audio", "min_speed", 0.0),
    ],
)
def test_invalid_values_are_rejected(section, key, value):
    config = Config()
    setattr(getattr(config, section), key, value)

    with pytest.raises(ConfigurationError):
        config.validate()


def test_block_size_may_be_any_multiple_of_576():
    config = Config()
    config.encoder.block_size = 576 * 4

    config.validate()


@pytest.mark.parametrize(
    "speed, expected",
    [(1.0, 1.0), (1.04, 1.0), (1.06, 1.1), (0.1, 0.5), (3.7, 2.0), (1.3, 1.3)],
)
def test_clamp_speed(speed, expected):
    assert Config().clamp_speed(speed) == expected


@pytest.mark.parametrize(
    "data",
    [
        {"audio": None},
        {"encoder": []},
        {"audio": {"sample_rate": "24000"}},
        {"encoder": {"block_size": "1152"}},
        {"encoder": {"bitrate_kbps": True}},
        {"audio": {"default_speed": "fast"}},
        {"encoder": {"output_format": 3}},
        {"output_dir": 42},
        [1, 2, 3],
    ],
)
def test_wrongly_typed_settings_are_configuration_errors(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data))

    with pytest.raises(ConfigurationError):
        Config.load(path)
