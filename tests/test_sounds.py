"""Tests for the sound domain."""

from pathlib import Path

import pytest

from pack_diagnostic.builder import ReferenceBuilder
from pack_diagnostic.core.errors import InvalidEntryError, VersionMismatchError
from pack_diagnostic.core.slop import Slop
from pack_diagnostic.core.types import BadExtension, BadName
from pack_diagnostic.domains.sounds import SoundEntry, SoundsDomain
from pack_diagnostic.scanner import Scanner


class TestSoundEntry:
    """Test conversion of extracted sound names."""

    def test_wav_becomes_xnb(self) -> None:
        """Test that the reference stores the packaged name."""
        entry = SoundEntry.from_source(Path("Sounds/Custom/drip.wav"))
        assert str(entry) == "drip.xnb"

    def test_rejects_other_formats(self) -> None:
        """Test that only `.wav` files enter the reference."""
        with pytest.raises(InvalidEntryError) as excinfo:
            SoundEntry.from_source(Path("Sounds/drip.ogg"))

        assert excinfo.value.reason == BadExtension("Sounds/drip.ogg", ("wav",))


class TestSoundReference:
    """Test generating the sound reference."""

    def test_writes_version_zero(self, tmp_path, patterns, write_file) -> None:
        """Test the written reference for a small extracted tree."""
        source = tmp_path / "Sounds"
        write_file(source / "drip.wav")
        write_file(source / "Custom" / "splash.wav")
        write_file(source / "notes.txt")

        domain = SoundsDomain(patterns)
        data = ReferenceBuilder(domain, show_progress=False).build(source)
        path = domain.write_reference(data, tmp_path)

        assert path.read_text(encoding="utf-8") == (
            "!version=0\n"
            "!count=3\n"
            "/{\n"
            "    drip.xnb\n"
            "}\n"
            "/Custom{\n"
            "    splash.xnb\n"
            "}\n"
        )
        assert data.summary().invalid_count == 1

    def test_rejects_image_version(self, tmp_path, patterns) -> None:
        """Test that a reference with another version is refused."""
        Slop({"!version": "1", "!count": "0"}).save(tmp_path / "sounds.slop")

        with pytest.raises(VersionMismatchError):
            SoundsDomain(patterns).open_validator(tmp_path, tmp_path)


class TestSoundValidator:
    """Test scanning a pack's sounds."""

    def test_classifies_pack_sounds(self, tmp_path, patterns, write_file) -> None:
        """Test packaged, unpackaged, unknown and misplaced sounds."""
        refs = tmp_path / "refs"
        refs.mkdir()
        Slop({"!version": "0", "!count": "2", "/": ["drip.xnb"], "/Custom": ["splash.xnb"]}).save(
            refs / "sounds.slop"
        )

        root = tmp_path / "Sounds"
        write_file(root / "drip.xnb")
        write_file(root / "drip.wav")
        write_file(root / "README")
        write_file(root / "splash.xnb")
        write_file(root / "Custom" / "splash.xnb")

        validator = SoundsDomain(patterns).open_validator(refs, root)
        scanner = Scanner(show_progress=False)
        scanner.scan(validator)

        assert validator.total_count == 2
        assert scanner.valid_count == 2
        assert scanner.invalid_items == [
            BadName("README", "the sound reference"),
            BadExtension("drip.wav", ("xnb",)),
            BadName("splash.xnb", "the sound reference"),
        ]

    def test_unpackaged_sound_message(self, tmp_path, patterns, write_file) -> None:
        """Test how an unconverted sound is reported."""
        Slop({"!version": "0", "!count": "1", "/": ["drip.xnb"]}).save(tmp_path / "sounds.slop")
        path = write_file(tmp_path / "Sounds" / "drip.wav")

        status = SoundsDomain(patterns).open_validator(tmp_path, tmp_path / "Sounds").classify(path)

        assert str(status.reason) == '"drip.wav"\t: Invalid file format. Accepted: xnb'
