"""Shared fixtures."""
import importlib
import sys
import types

import numpy as np
import pytest
from scipy.io import wavfile

from core.persistence import MemoryStore
from core.repository import BoardRepository

SOUNDDEVICE_USERS = ("audio.player", "ui.views.BoardView")


@pytest.fixture
def store():
    """Empty in-memory preference store."""
    return MemoryStore()


@pytest.fixture
def repository(store):
    """Repository over an empty store."""
    return BoardRepository(store)


@pytest.fixture
def wav_file(tmp_path):
    """Half a second of 16-bit mono 440 Hz at 8 kHz."""
    sample_rate = 8000
    t = np.arange(sample_rate // 2) / sample_rate
    samples = (np.sin(2 * np.pi * 440 * t) * 16000).astype(np.int16)
    path = tmp_path / "beep.wav"
    wavfile.write(str(path), sample_rate, samples)
    return path


@pytest.fixture
def fake_sounddevice(monkeypatch):
    """
    Recording stand-in for the sounddevice module.

    No PortAudio or output device is needed. Calls land in .calls:
    {"play": [(data, samplerate, device), ...], "stop": count}.
    """
    module = types.ModuleType("sounddevice")
    module.calls = {"play": [], "stop": 0}

    class PortAudioError(Exception):
        pass

    def play(data, samplerate=None, device=None):
        module.calls["play"].append((data, samplerate, device))

    def stop():
        module.calls["stop"] += 1

    module.PortAudioError = PortAudioError
    module.play = play
    module.stop = stop

    monkeypatch.setitem(sys.modules, "sounddevice", module)

    # Modules bound to sounddevice are imported again against the fake,
    # then put back the way they were
    saved = {name: sys.modules.pop(name, None) for name in SOUNDDEVICE_USERS}
    yield module
    for name, original in saved.items():
        if original is None:
            sys.modules.pop(name, None)
        else:
            sys.modules[name] = original


@pytest.fixture
def player_module(fake_sounddevice):
    """audio.player imported against the fake sounddevice."""
    return importlib.import_module("audio.player")
