"""Canonical 44-byte WAV header for the fixed upload format.

Uploaded bodies are treated as PCM16LE, 16kHz, mono samples. The header is
synthesized from the payload length only; nothing in the request can change
the channel count, sample rate or bit depth.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

__all__ = [
    "BITS_PER_SAMPLE",
    "NUM_CHANNELS",
    "SAMPLE_RATE",
    "WAV_HEADER_SIZE",
    "WavHeader",
    "create_wav_header",
]

NUM_CHANNELS = 1
SAMPLE_RATE = 16000
BITS_PER_SAMPLE = 16

WAV_HEADER_SIZE = 44

_UINT32_MASK = 0xFFFFFFFF

# RIFF descriptor, "fmt " subchunk, "data" subchunk header.
_HEADER_STRUCT = struct.Struct("<4sI4s4sIHHIIHH4sI")


@dataclass(frozen=True)
class WavHeader:
    chunk_id: bytes
    chunk_size: int
    format: bytes
    subchunk1_id: bytes
    subchunk1_size: int
    audio_format: int
    num_channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    subchunk2_id: bytes
    subchunk2_size: int

    @classmethod
    def for_data_length(cls, data_length: int) -> "WavHeader":
        """Build the header describing `data_length` bytes of PCM payload.

        Sizes are stored as uint32 and wrap around instead of being rejected.
        """
        byte_rate = SAMPLE_RATE * NUM_CHANNELS * BITS_PER_SAMPLE // 8
        block_align = NUM_CHANNELS * BITS_PER_SAMPLE // 8
        return cls(
            chunk_id=b"RIFF",
            chunk_size=(36 + data_length) & _UINT32_MASK,
            format=b"WAVE",
            subchunk1_id=b"fmt ",
            subchunk1_size=16,
            audio_format=1,  # PCM
            num_channels=NUM_CHANNELS,
            sample_rate=SAMPLE_RATE,
            byte_rate=byte_rate,
            block_align=block_align,
            bits_per_sample=BITS_PER_SAMPLE,
            subchunk2_id=b"data",
            subchunk2_size=data_length & _UINT32_MASK,
        )

    @classmethod
    def unpack(cls, data: bytes) -> "WavHeader":
        """Parse the first 44 bytes of `data`."""
        if len(data) < WAV_HEADER_SIZE:
            raise ValueError(f"WAV header needs {WAV_HEADER_SIZE} bytes, got {len(data)}")
        return cls(*_HEADER_STRUCT.unpack_from(data, 0))

    def pack(self) -> bytes:
        return _HEADER_STRUCT.pack(
            self.chunk_id,
            self.chunk_size,
            self.format,
            self.subchunk1_id,
            self.subchunk1_size,
            self.audio_format,
            self.num_channels,
            self.sample_rate,
            self.byte_rate,
            self.block_align,
            self.bits_per_sample,
            self.subchunk2_id,
            self.subchunk2_size,
        )

    @property
    def duration_seconds(self) -> float:
        if self.byte_rate == 0:
            return 0.0
        return self.subchunk2_size / self.byte_rate


def create_wav_header(data_length: int) -> bytes:
    """Return the 44-byte header for a mono 16kHz 16-bit payload of `data_length` bytes."""
    return WavHeader.for_data_length(data_length).pack()
