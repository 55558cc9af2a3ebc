import struct

import numpy as np
import pytest

from ugc_voiceover.cli import create_parser, main


@pytest.fixture
def payload_file(tmp_path, pcm_payload):
    path = tmp_path / "speech.b64"
    path.write_text(pcm_payload(np.zeros(2400, dtype=np.int16)), encoding="ascii")
    return path


def test_parser_defaults():
    args = create_parser().parse_args(["-i", "speech.b64"])

    assert args.speed is None
    assert args.output_format is None
    assert args.voice_label == "Default"
    assert not args.quiet


def test_writes_wav_named_after_voice(tmp_path, payload_file):
    out_dir = tmp_path / "out"

    main(["-i", str(payload_file), "-o", str(out_dir), "--format", "wav",
          "--voice-label", "Warm Narrator", "-q"])

    output = out_dir / "ugc-voiceover-warm-narrator.wav"
    data = output.read_bytes()
    assert len(data) == 44 + 2 * 2400
    assert struct.unpack("<I", data[24:28])[0] == 24000


def test_existing_file_gets_numbered(tmp_path, payload_file):
    out_dir = tmp_path / "out"
    args = ["-i", str(payload_file), "-o", str(out_dir), "-f", "wav", "-q"]

    main(args)
    main(args)

    assert (out_dir / "ugc-voiceover-default.wav").exists()
    assert (out_dir / "ugc-voiceover-default_2.wav").exists()


def test_speed_is_snapped_to_slider_grid(tmp_path, payload_file, capsys):
    out_dir = tmp_path / "out"

    main(["-i", str(payload_file), "-o", str(out_dir), "-f", "wav", "-s", "3.7"])

    data = (out_dir / "ugc-voiceover-default.wav").read_bytes()
    assert len(data) == 44 + 2 * 1200
    out = capsys.readouterr().out
    assert "adjusted to 2.0x" in out
    assert "VOICEOVER COMPLETE" in out


def test_decode_error_exits_with_status_one(tmp_path, capsys):
    bad = tmp_path / "bad.b64"
    bad.write_text("AAEC", encoding="ascii")

    with pytest.raises(SystemExit) as exc:
        main(["-i", str(bad), "-o", str(tmp_path), "-q"])

    assert exc.value.code == 1
    assert "Error" in capsys.readouterr().out


def test_missing_input_is_a_usage_error():
    with pytest.raises(SystemExit) as exc:
        main([])

    assert exc.value.code == 2


def test_config_file_sets_output_dir(tmp_path, payload_file):
    from ugc_voiceover.config import Config

    config = Config(output_dir=tmp_path / "from-config")
    config.encoder.output_format = "wav"
    settings = tmp_path / "settings.json"
    config.save(settings)

    main(["-i", str(payload_file), "--config", str(settings), "-q"])

    assert (tmp_path / "from-config" / "ugc-voiceover-default.wav").exists()


def test_wrongly_typed_config_exits_cleanly(tmp_path, payload_file, capsys):
    settings = tmp_path / "settings.json"
    settings.write_text('{"audio": null}')

    with pytest.raises(SystemExit) as exc:
        main(["-i", str(payload_file), "--config", str(settings), "-q"])

    assert exc.value.code == 1
    assert "Error" in capsys.readouterr().out


def test_line_wrapped_input_file_renders(tmp_path, pcm_payload):
    encoded = pcm_payload(np.zeros(2400, dtype=np.int16))
    path = tmp_path / "wrapped.b64"
    path.write_text(
        "\n".join(encoded[i:i + 76] for i in range(0, len(encoded), 76)) + "\n",
        encoding="ascii",
    )
    out_dir = tmp_path / "out"

    main(["-i", str(path), "-o", str(out_dir), "-f", "wav", "-q"])

    assert len((out_dir / "ugc-voiceover-default.wav").read_bytes()) == 44 + 2 * 2400
