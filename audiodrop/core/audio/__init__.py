"""Audio container helpers"""
from audiodrop.core.audio.wav import (
    BITS_PER_SAMPLE,
    NUM_CHANNELS,
    SAMPLE_RATE,
    WAV_HEADER_SIZE,
    WavHeader,
    create_wav_header,
)

__all__ = [
    'BITS_PER_SAMPLE',
    'NUM_CHANNELS',
    'SAMPLE_RATE',
    'WAV_HEADER_SIZE',
    'WavHeader',
    'create_wav_header',
]
