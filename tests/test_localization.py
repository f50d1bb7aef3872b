"""Tests for the localization domain."""

import pytest

from pack_diagnostic.builder import ReferenceBuilder
from pack_diagnostic.core.errors import InvalidEntryError, MissingReferenceError, RecordReadError
from pack_diagnostic.core.types import EmptyRecord, MissingKey, UnrecognizedFileName
from pack_diagnostic.domains.localization import LocalizationDomain, LocalizationKey
from pack_diagnostic.scanner import Scanner


class TestLocalizationKey:
    """Test keys taken from CSV records."""

    def test_first_column_is_key(self) -> None:
        """Test that only the first column matters."""
        assert LocalizationKey.from_record(["greeting", "Hello"], "Loc.csv", 1).key == "greeting"

    def test_empty_records(self) -> None:
        """Test that blank records and empty keys are rejected."""
        for record in ([], ["", "Hello"]):
            with pytest.raises(InvalidEntryError) as excinfo:
                LocalizationKey.from_record(record, "Loc.csv", 7)

            assert excinfo.value.reason == EmptyRecord("Loc.csv", 7)

    def test_comments(self) -> None:
        """Test that `#` keys are comments."""
        assert LocalizationKey("#legacy_key").is_comment
        assert not LocalizationKey("legacy#key").is_comment


class TestLocalizationFileNames:
    """Test locale file name recognition."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("en-US-main.csv", "csv"),
            ("zh-Hans-strings.json", "json"),
            ("pl-PL-.csv", "csv"),
            ("en-GB-main.csv", None),
            ("en-US.csv", None),
            ("en-US-main.txt", None),
            ("main-en-US.csv", None),
        ],
    )
    def test_file_type(self, tmp_path, patterns, name: str, expected) -> None:
        """Test that only `<locale>-<anything>.csv|json` is recognized."""
        assert LocalizationDomain(patterns).file_type(tmp_path / name) == expected


class TestLocalizationReference:
    """Test generating the localization reference."""

    def test_writes_every_key(self, tmp_path, patterns, write_file) -> None:
        """Test that every first column after the header, comments included, is a key."""
        source = write_file(
            tmp_path / "Loc.csv",
            "key,en-US\n#legacy_key,old\ngreeting,Hello\n,empty\nfarewell,Bye\n",
        )

        domain = LocalizationDomain(patterns)
        data = ReferenceBuilder(domain, show_progress=False).build(source)
        path = domain.write_reference(data, tmp_path)

        assert path == tmp_path / "loc_keys.txt"
        assert path.read_text(encoding="utf-8") == "#legacy_key\ngreeting\nfarewell\n"
        assert list(data.invalid_entries.values()) == [EmptyRecord(source.as_posix(), 4)]

    def test_quoted_keys(self, tmp_path, patterns, write_file) -> None:
        """Test that CSV quoting is honoured."""
        source = write_file(tmp_path / "Loc.csv", 'key,text\n"a,b","x"\n')

        data = ReferenceBuilder(LocalizationDomain(patterns), show_progress=False).build(source)

        assert [str(entry) for entry in data.entries()] == ["a,b"]

    def test_missing_reference(self, tmp_path, patterns) -> None:
        """Test that scanning without a reference is fatal."""
        with pytest.raises(MissingReferenceError):
            LocalizationDomain(patterns).open_validator(tmp_path, tmp_path)


class TestLocalizationValidator:
    """Test scanning a pack's localization files."""

    @pytest.fixture
    def validator(self, tmp_path, patterns, write_file):
        refs = write_file(tmp_path / "refs" / "loc_keys.txt", "greeting\nfarewell\n").parent
        root = tmp_path / "Localization"
        write_file(
            root / "en-US-main.csv",
            "key,text\ngreeting,Hallo\n#legacy_key,x\nunknown,y\n\n",
        )
        write_file(root / "de-DE-extra.json", "{}")
        write_file(root / "notes.txt", "todo")
        write_file(root / "xx-XX-main.csv", "greeting,?\n")
        write_file(root / "Nested" / "en-US-nested.csv", "unknown,z\n")
        return LocalizationDomain(patterns).open_validator(refs, root)

    def test_classifies_rows_and_files(self, validator) -> None:
        """Test valid keys, comment rows, unknown keys and unknown files."""
        scanner = Scanner(show_progress=False)
        scanner.scan(validator)

        assert validator.total_count == 2
        assert scanner.valid_count == 1
        assert scanner.invalid_items == [
            MissingKey("en-US-main.csv", "unknown"),
            EmptyRecord("en-US-main.csv", 5),
            UnrecognizedFileName("notes.txt"),
            UnrecognizedFileName("xx-XX-main.csv"),
        ]

    def test_comment_rows_are_never_invalid(self, validator) -> None:
        """Test that `#legacy_key` is ignored although it is not a key."""
        scanner = Scanner(show_progress=False)
        scanner.scan(validator)

        assert "#legacy_key" not in validator.keys
        assert not any("legacy" in str(item) for item in scanner.invalid_items)

    def test_json_files_are_not_validated(self, validator, capsys) -> None:
        """Test that JSON files only produce a warning."""
        status = validator.classify(validator.root / "de-DE-extra.json")

        assert status.is_ignored
        assert "JSON files aren't validated yet" in capsys.readouterr().err

    def test_copy_eligibility(self, validator) -> None:
        """Test that well-named files are copied whatever their content."""
        root = validator.root

        assert validator.is_copy_eligible(root / "en-US-main.csv")
        assert validator.is_copy_eligible(root / "de-DE-extra.json")
        assert not validator.is_copy_eligible(root / "notes.txt")
        assert not validator.is_copy_eligible(root / "xx-XX-main.csv")

    def test_missing_key_message(self) -> None:
        """Test how an unknown key is reported."""
        assert str(MissingKey("en-US-main.csv", "unknown")) == (
            '"en-US-main.csv"\t: The key `unknown` was not found in the localization reference.'
        )


class TestHeaderRows:
    """Test that the first record of every CSV file is a header."""

    def test_headers_are_neither_keys_nor_items(self, tmp_path, patterns, write_file) -> None:
        """Test differing headers in the reference and the pack."""
        source = write_file(tmp_path / "extracted" / "Loc.csv", "Key,English\ngreeting,Hello\n")
        refs = tmp_path / "refs"
        refs.mkdir()
        domain = LocalizationDomain(patterns)
        domain.write_reference(ReferenceBuilder(domain, show_progress=False).build(source), refs)

        root = tmp_path / "Localization"
        write_file(root / "en-US-main.csv", "key,text\ngreeting,Hallo\n")
        validator = domain.open_validator(refs, root)
        scanner = Scanner(show_progress=False)
        scanner.scan(validator)

        assert (refs / "loc_keys.txt").read_text(encoding="utf-8") == "greeting\n"
        assert validator.total_count == 1
        assert scanner.valid_count == 1
        assert scanner.invalid_items == []

    def test_header_only_file(self, tmp_path, patterns, write_file) -> None:
        """Test that a file with just a header has no items."""
        refs = write_file(tmp_path / "refs" / "loc_keys.txt", "greeting\n").parent
        root = tmp_path / "Localization"
        write_file(root / "en-US-main.csv", "greeting,text\n")

        validator = LocalizationDomain(patterns).open_validator(refs, root)

        assert list(validator.items()) == []

    def test_non_utf8_file(self, tmp_path, patterns, write_file) -> None:
        """Test that undecodable CSV files raise RecordReadError."""
        refs = write_file(tmp_path / "refs" / "loc_keys.txt", "greeting\n").parent
        root = tmp_path / "Localization"
        root.mkdir()
        (root / "en-US-main.csv").write_bytes(b"key,text\ngreeting,\xff\n")

        validator = LocalizationDomain(patterns).open_validator(refs, root)

        with pytest.raises(RecordReadError) as excinfo:
            Scanner(show_progress=False).scan(validator)

        assert excinfo.value.path == root / "en-US-main.csv"
