"""AudioDrop: raw PCM upload service that stores WAV files."""
