"""Tests for the domain layer."""

import pytest

from tagsnap.domain import (
    SourceFileSpec,
    SOURCE_FILES,
    FileOutcome,
    ExtractionResult,
    TagStatus,
    TagResult,
    RunSummary,
    build_commit_message,
    marker_line,
    marker_pattern,
)


class TestSourceFiles:
    """Tests for the built-in tracked file set."""

    def test_two_tracked_files(self):
        """Test the fixed set of tracked files."""
        assert [spec.name for spec in SOURCE_FILES] == ["Core prompts", "Tool registry"]
        assert SOURCE_FILES[0].source_path == "packages/core/src/core/prompts.ts"
        assert SOURCE_FILES[0].target_path == "prompts/prompts.ts"
        assert SOURCE_FILES[1].source_path == "packages/core/src/tools/tool-registry.ts"
        assert SOURCE_FILES[1].target_path == "tools/tool-registry.ts"

    def test_destinations_are_distinct(self):
        """Test that no two specs write the same destination."""
        targets = [spec.target_path for spec in SOURCE_FILES]
        assert len(targets) == len(set(targets))

    def test_spec_is_immutable(self):
        """Test that SourceFileSpec is frozen."""
        spec = SourceFileSpec("a.ts", "b.ts", "A")
        with pytest.raises(AttributeError):
            spec.name = "B"


class TestExtractionResult:
    """Tests for ExtractionResult."""

    def test_empty(self):
        result = ExtractionResult()
        assert result.extracted == []
        assert result.missing == []

    def test_missing_includes_not_found_and_failed(self):
        """Test that unreadable files are reported as missing too."""
        a = SourceFileSpec("a", "a", "A")
        b = SourceFileSpec("b", "b", "B")
        c = SourceFileSpec("c", "c", "C")

        result = ExtractionResult()
        result.add(a, FileOutcome.EXTRACTED)
        result.add(b, FileOutcome.NOT_FOUND)
        result.add(c, FileOutcome.FAILED, error="Permission denied")

        assert result.extracted == ["A"]
        assert result.missing == ["B", "C"]
        assert result.files[2].error == "Permission denied"

    def test_order_follows_insertion(self):
        specs = [SourceFileSpec(n, n, n.upper()) for n in "zyx"]
        result = ExtractionResult()
        for spec in specs:
            result.add(spec, FileOutcome.EXTRACTED)
        assert result.extracted == ["Z", "Y", "X"]


class TestCommitMessage:
    """Tests for commit message construction."""

    def test_extracted_and_missing(self):
        """Test the message for one extracted and one missing file."""
        message = build_commit_message("v0.5.0", ["Core prompts"], ["Tool registry"])

        assert message == (
            "Add metadata for v0.5.0\n"
            "\n"
            "Extracted:\n"
            "- Core prompts\n"
            "\n"
            "Missing:\n"
            "- Tool registry\n"
        )

    def test_first_line_is_marker(self):
        message = build_commit_message("v0.5.0", ["Core prompts"], ["Tool registry"])
        assert message.splitlines()[0] == "Add metadata for v0.5.0"
        assert message.splitlines()[0] == marker_line("v0.5.0")

    def test_missing_section_omitted_when_empty(self):
        """Test that no Missing: block appears when everything was extracted."""
        message = build_commit_message("v0.1.0", ["Core prompts", "Tool registry"], [])

        assert "Missing:" not in message
        assert message.endswith("- Core prompts\n- Tool registry\n")

    def test_nothing_extracted(self):
        message = build_commit_message("v0.1.0", [], ["Core prompts"])
        assert "Extracted:\n\nMissing:\n- Core prompts\n" in message

    def test_quotes_kept_verbatim(self):
        """Test that quoting is left to the git client."""
        message = build_commit_message('v0.1.0', ['Say "hi"'], [])
        assert '- Say "hi"' in message


class TestMarkerPattern:
    """Tests for the ledger grep pattern."""

    def test_dots_escaped_and_anchored(self):
        assert marker_pattern("v0.1.0") == r"Add metadata for v0\.1\.0$"

    def test_plain_tag(self):
        assert marker_pattern("v0") == "Add metadata for v0$"

    def test_brackets_escaped(self):
        assert marker_pattern("v0.[x]") == r"Add metadata for v0\.\[x\]$"


class TestRunSummary:
    """Tests for RunSummary."""

    def test_counts(self):
        summary = RunSummary()
        summary.add(TagResult(tag="v0.1.0", status=TagStatus.COMMITTED))
        summary.add(TagResult(tag="v0.1.1", status=TagStatus.UNCHANGED))
        summary.add(TagResult(tag="v0.1.2", status=TagStatus.SKIPPED))
        summary.add(TagResult(tag="v0.1.3", status=TagStatus.FAILED, error="boom"))

        assert summary.total == 4
        assert summary.committed == 1
        assert summary.unchanged == 1
        assert summary.skipped == 1
        assert summary.failed == 1
        assert summary.success is False
        assert summary.processed_tags == ["v0.1.0", "v0.1.1", "v0.1.3"]

    def test_to_dict(self):
        summary = RunSummary()
        summary.add(TagResult(tag="v0.1.0", status=TagStatus.COMMITTED))

        d = summary.to_dict()

        assert d['type'] == 'summary'
        assert d['committed'] == 1
        assert d['failed'] == 0

    def test_tag_result_to_dict(self):
        result = TagResult(
            tag="v0.1.0",
            status=TagStatus.FAILED,
            missing=["Tool registry"],
            error="checkout failed",
        )

        d = result.to_dict()

        assert d['status'] == 'failed'
        assert d['missing'] == ["Tool registry"]
        assert d['error'] == "checkout failed"
