import io
import struct
import wave

import pytest


def _pcm_to_wav_bytes(pcm16le: bytes, sample_rate: int = 16000) -> bytes:
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        wf.writeframes(pcm16le)
    return buf.getvalue()


@pytest.mark.parametrize("n", [0, 1, 2, 100, 32000, 1_000_001, 2**31])
def test_header_sizes_track_data_length(n):
    from audiodrop.core.audio.wav import create_wav_header

    header = create_wav_header(n)

    assert len(header) == 44
    assert struct.unpack_from("<I", header, 4)[0] == 36 + n
    assert struct.unpack_from("<I", header, 40)[0] == n


@pytest.mark.parametrize("n", [0, 7, 48000])
def test_header_format_fields_are_fixed(n):
    from audiodrop.core.audio.wav import create_wav_header

    header = create_wav_header(n)

    assert header[0:4] == b"RIFF"
    assert header[8:12] == b"WAVE"
    assert header[12:16] == b"fmt "
    assert header[36:40] == b"data"
    assert struct.unpack_from("<I", header, 16)[0] == 16      # fmt chunk size
    assert struct.unpack_from("<H", header, 20)[0] == 1       # PCM
    assert struct.unpack_from("<H", header, 22)[0] == 1       # channels
    assert struct.unpack_from("<I", header, 24)[0] == 16000   # sample rate
    assert struct.unpack_from("<I", header, 28)[0] == 32000   # byte rate
    assert struct.unpack_from("<H", header, 32)[0] == 2       # block align
    assert struct.unpack_from("<H", header, 34)[0] == 16      # bits per sample


def test_header_matches_stdlib_wave_writer():
    from audiodrop.core.audio.wav import create_wav_header

    pcm = bytes(range(256)) * 10

    assert create_wav_header(len(pcm)) + pcm == _pcm_to_wav_bytes(pcm)


def test_header_plus_payload_reads_back_with_wave():
    from audiodrop.core.audio.wav import create_wav_header

    pcm = struct.pack("<8h", 0, 1000, -1000, 32767, -32768, 12, -12, 0)

    with wave.open(io.BytesIO(create_wav_header(len(pcm)) + pcm), "rb") as wf:
        assert wf.getnchannels() == 1
        assert wf.getsampwidth() == 2
        assert wf.getframerate() == 16000
        assert wf.getnframes() == 8
        assert wf.readframes(wf.getnframes()) == pcm


def test_sizes_wrap_as_uint32():
    from audiodrop.core.audio.wav import WavHeader

    h = WavHeader.for_data_length(2**32 + 5)
    assert h.subchunk2_size == 5
    assert h.chunk_size == 41

    neg = WavHeader.for_data_length(-1)
    assert neg.subchunk2_size == 0xFFFFFFFF
    assert neg.chunk_size == 35
    assert len(neg.pack()) == 44


def test_unpack_reads_back_packed_header():
    from audiodrop.core.audio.wav import WavHeader, create_wav_header

    h = WavHeader.unpack(create_wav_header(100) + b"\x00" * 100)

    assert h == WavHeader.for_data_length(100)
    assert h.chunk_id == b"RIFF"
    assert h.subchunk2_size == 100


def test_unpack_rejects_short_buffer():
    from audiodrop.core.audio.wav import WavHeader

    with pytest.raises(ValueError):
        WavHeader.unpack(b"RIFF")


def test_duration_seconds():
    from audiodrop.core.audio.wav import WavHeader

    assert WavHeader.for_data_length(32000).duration_seconds == 1.0
    assert WavHeader.for_data_length(0).duration_seconds == 0.0
