"""
Audio playback layer for Sound Button Board.

Modules:
- player: WAV decoding (scipy) and non-blocking output (sounddevice)
"""
