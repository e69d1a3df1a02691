import logging

from game.shapes.sound import CUES, NullSound, SoundBank


class FakeSound:
    def __init__(self, path):
        self.path = path
        self.volumes = []

    def play(self, volume=1.0):
        self.volumes.append(volume)


class BrokenSound:
    def play(self, volume=1.0):
        raise RuntimeError("no audio device")


def write_cues(directory):
    for cue in CUES:
        (directory / f"{cue}.wav").write_bytes(b"RIFF")


def test_missing_files_become_silent(tmp_path, caplog):
    calls = []
    with caplog.at_level(logging.WARNING):
        bank = SoundBank(sound_dir=str(tmp_path), loader=calls.append)
    assert calls == []
    assert all(bank.is_silent(cue) for cue in CUES)
    assert "not found" in caplog.text
    bank.play("shoot")


def test_loads_and_plays(tmp_path):
    write_cues(tmp_path)
    bank = SoundBank(sound_dir=str(tmp_path), loader=FakeSound, volume=0.3)
    bank.play("hit")
    bank.play("hit")
    assert bank.sounds["hit"].volumes == [0.3, 0.3]
    assert bank.sounds["shoot"].path.endswith("shoot.wav")


def test_loader_failure_is_absorbed(tmp_path, caplog):
    write_cues(tmp_path)

    def loader(path):
        raise ValueError("bad wav")

    with caplog.at_level(logging.WARNING):
        bank = SoundBank(sound_dir=str(tmp_path), loader=loader)
    assert isinstance(bank.sounds["explosion"], NullSound)
    assert "bad wav" in caplog.text


def test_playback_failure_is_logged_not_raised(tmp_path, caplog):
    write_cues(tmp_path)
    bank = SoundBank(sound_dir=str(tmp_path), loader=lambda path: BrokenSound())
    with caplog.at_level(logging.WARNING):
        bank.play("shoot")
    assert "Playback of 'shoot' failed" in caplog.text


def test_disabled_bank_never_loads(tmp_path):
    write_cues(tmp_path)
    calls = []
    bank = SoundBank(sound_dir=str(tmp_path), loader=calls.append, enabled=False)
    assert calls == []
    assert all(bank.is_silent(cue) for cue in CUES)


def test_unknown_cue_is_ignored(tmp_path):
    bank = SoundBank(sound_dir=str(tmp_path), enabled=False)
    bank.play("fanfare")
