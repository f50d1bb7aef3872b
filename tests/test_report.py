"""Tests for scan reports, build summaries and the JSON schema."""

import pytest

from pack_diagnostic.cli import build_document
from pack_diagnostic.core.errors import ReportSchemaError
from pack_diagnostic.core.types import BadName
from pack_diagnostic.core.validator import (
    load_schema,
    report_problems,
    report_validator,
    validate_report,
)
from pack_diagnostic.report import BuildSummary, ScanReport, capped_listing


def bad_names(count: int) -> list[BadName]:
    return [BadName(f"Item_{i}.png") for i in range(count)]


class TestCappedListing:
    """Test list truncation."""

    def test_short_list(self) -> None:
        """Test that short lists are printed in full."""
        assert capped_listing(["a", "b"], "-") == ["- a", "- b"]

    def test_long_list(self) -> None:
        """Test that only the first items are listed, plus a remainder line."""
        lines = capped_listing(list(range(150)), "  -")

        assert len(lines) == 101
        assert lines[99] == "  - 99"
        assert lines[-1] == "  - ... and 50 more."

    def test_exactly_at_limit(self) -> None:
        """Test that no remainder line is added at the limit."""
        assert len(capped_listing(list(range(100)), "-")) == 100


class TestScanReport:
    """Test scan report rendering."""

    def test_counts_and_percentages(self) -> None:
        """Test the headline figures."""
        report = ScanReport("images", valid_count=1250, total_count=5000)

        assert report.percent == pytest.approx(25.0)
        assert report.milestone_percent == pytest.approx(25.0)
        assert report.render()[:2] == [
            "Found 1250/5000 items. (25.00% of the way!)",
            "- 25.0% of the way to the next 1000!",
        ]

    def test_empty_reference(self) -> None:
        """Test that an empty reference does not divide by zero."""
        report = ScanReport("music", valid_count=0, total_count=0)

        assert report.percent == 0.0
        assert report.render() == [
            "Found 0/0 items. (0.00% of the way!)",
            "- 0.0% of the way to the next 1000!",
            "- No invalid items found!",
        ]

    def test_no_invalid_items(self) -> None:
        """Test that a clean scan has no listing and no remainder."""
        report = ScanReport("sounds", valid_count=3, total_count=4)
        lines = report.render()

        assert lines[-1] == "- No invalid items found!"
        assert not any("more." in line for line in lines)
        assert report.to_dict()["remaining_invalid"] == 0

    def test_caps_invalid_listing(self) -> None:
        """Test that 150 invalid items list 100 and mention 50 more."""
        report = ScanReport("images", 0, 10, bad_names(150))
        lines = report.render()

        assert lines[2] == "- Found 150 invalid items."
        assert lines[3] == '  - "Item_0.png"\t: The name `Item_0.png` was not found in the reference.'
        assert len(lines) == 3 + 100 + 1
        assert lines[-1] == "  - ... and 50 more."

    def test_single_invalid_item(self) -> None:
        """Test the singular form."""
        report = ScanReport("images", 0, 1, bad_names(1))
        assert report.render()[2] == "- Found 1 invalid item."

    def test_to_dict(self) -> None:
        """Test the JSON form of a report."""
        data = ScanReport("images", 1, 3, bad_names(150)).to_dict()

        assert data["domain"] == "images"
        assert data["invalid_count"] == 150
        assert data["percent"] == 33.33
        assert len(data["invalid_items"]) == 100
        assert data["remaining_invalid"] == 50


class TestBuildSummary:
    """Test reference generation summaries."""

    def test_clean_build(self) -> None:
        """Test a build without rejected items."""
        assert BuildSummary("images", 12).render() == [
            "Found 12 valid images.",
            "- No invalid items found!",
        ]

    def test_rejected_items(self) -> None:
        """Test that rejected items are listed."""
        lines = BuildSummary("sounds", 2, bad_names(2)).render()

        assert lines[1].startswith("- Found 2 invalid items:")
        assert "They will not be included in the reference file." in lines[1]
        assert len(lines) == 4


class TestReportSchema:
    """Test the `scan --json` document schema."""

    def test_schema_is_loaded_once(self) -> None:
        """Test that the bundled schema is read and compiled a single time."""
        assert load_schema() is load_schema()
        assert report_validator() is report_validator()
        assert "reports" in load_schema()["properties"]

    def test_valid_document(self, tmp_path) -> None:
        """Test that generated documents conform to the schema."""
        reports = [
            ScanReport("images", 1, 3, bad_names(150)),
            ScanReport("music", 0, 0),
        ]
        document = build_document(tmp_path, reports)

        assert report_problems(document) == []
        validate_report(document)

    def test_rejects_unknown_domain(self, tmp_path) -> None:
        """Test that the domain name is checked."""
        document = build_document(tmp_path, [ScanReport("videos", 0, 0)])

        with pytest.raises(ReportSchemaError) as excinfo:
            validate_report(document)

        assert excinfo.value.problems[0].startswith("videos report: domain: ")

    def test_problems_name_the_domain_report(self, tmp_path) -> None:
        """Test that errors point at the report and field that failed."""
        document = build_document(
            tmp_path, [ScanReport("images", 0, 0), ScanReport("sounds", 0, 0)]
        )
        document["reports"][1]["valid_count"] = -1
        document["reports"][1]["percent"] = "high"

        problems = report_problems(document)

        assert len(problems) == 2
        assert problems[0].startswith("sounds report: percent: ")
        assert problems[1] == "sounds report: valid_count: -1 is less than the minimum of 0"

    def test_document_level_problems(self, tmp_path) -> None:
        """Test errors outside of any report."""
        document = build_document(tmp_path, [])
        document["pack_root"] = ""

        problems = report_problems(document)

        assert len(problems) == 1
        assert problems[0].startswith("pack_root: ")
