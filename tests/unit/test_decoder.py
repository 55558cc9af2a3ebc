import base64

import numpy as np
import pytest

from ugc_voiceover.core.decoder import SPEECH_SAMPLE_RATE, decode_pcm16_base64
from ugc_voiceover.exceptions import DecodeError


def test_even_byte_length_yields_half_as_many_samples(pcm_payload):
    buffer = decode_pcm16_base64(pcm_payload(range(-50, 50)))

    assert buffer.num_samples == 100
    assert len(buffer) == 100
    assert buffer.sample_rate == SPEECH_SAMPLE_RATE
    assert buffer.channels == 1


def test_samples_are_little_endian_and_normalized(pcm_payload):
    buffer = decode_pcm16_base64(pcm_payload([0, 16384, -32768, 32767, 1]))

    expected = np.array([0.0, 0.5, -1.0, 32767 / 32768.0, 1 / 32768.0], dtype=np.float32)
    np.testing.assert_array_equal(buffer.samples, expected)


def test_raw_bytes_are_read_little_endian():
    payload = base64.b64encode(b"\x01\x00\x00\x80")

    buffer = decode_pcm16_base64(payload)

    np.testing.assert_array_equal(buffer.samples, np.array([1 / 32768.0, -1.0], dtype=np.float32))


def test_odd_byte_length_is_rejected():
    payload = base64.b64encode(b"\x00\x01\x02").decode("ascii")

    with pytest.raises(DecodeError, match="16-bit"):
        decode_pcm16_base64(payload)


@pytest.mark.parametrize("payload", ["", "   ", b""])
def test_empty_payload_is_rejected(payload):
    with pytest.raises(DecodeError, match="empty"):
        decode_pcm16_base64(payload)


def test_invalid_base64_is_rejected():
    with pytest.raises(DecodeError, match="base64"):
        decode_pcm16_base64("not*base64!")


def test_non_ascii_payload_is_rejected():
    with pytest.raises(DecodeError):
        decode_pcm16_base64("AAAAé")


def test_data_url_prefix_and_whitespace_are_stripped(pcm_payload):
    payload = "  data:audio/L16;rate=24000;base64," + pcm_payload([100, -100]) + "\n"

    buffer = decode_pcm16_base64(payload)

    assert buffer.num_samples == 2


def test_custom_sample_rate_is_tagged(pcm_payload):
    buffer = decode_pcm16_base64(pcm_payload([0, 0]), sample_rate=16000)

    assert buffer.sample_rate == 16000
    assert buffer.duration_seconds == pytest.approx(2 / 16000)


def test_decoded_samples_are_read_only(pcm_payload):
    buffer = decode_pcm16_base64(pcm_payload([1, 2, 3]))

    with pytest.raises(ValueError):
        buffer.samples[0] = 0.5


def test_line_wrapped_payload_is_accepted(pcm_payload):
    encoded = pcm_payload(np.arange(200, dtype=np.int16))
    wrapped = "\n".join(encoded[i:i + 76] for i in range(0, len(encoded), 76)) + "\n"

    buffer = decode_pcm16_base64(wrapped)

    assert buffer.num_samples == 200
    assert buffer.samples[199] == pytest.approx(199 / 32768.0)


def test_embedded_garbage_is_still_rejected(pcm_payload):
    encoded = pcm_payload(np.zeros(200, dtype=np.int16))

    with pytest.raises(DecodeError, match="base64"):
        decode_pcm16_base64(encoded[:40] + "\n#!\n" + encoded[40:])
