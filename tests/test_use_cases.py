"""
Tests for use cases — run_sync (generate / check) and describe_sources.
"""

import hashlib
from pathlib import Path

from refsync.core.services.manifest import OUTPUT_FILE, SECTIONS
from refsync.core.use_cases.sources import describe_sources
from refsync.core.use_cases.sync import SyncResult, run_sync


class TestSyncResult:
    def test_defaults(self):
        r = SyncResult()
        assert r.ok is False
        assert r.exit_code == 1

    def test_to_dict(self):
        r = SyncResult(check=True, up_to_date=True, sections=8)
        d = r.to_dict()
        assert d["mode"] == "check"
        assert d["ok"] is True
        assert d["sections"] == 8


class TestRunSyncGenerate:
    def test_writes_output(self, repo: Path):
        result = run_sync(repo, today="2026-03-14")
        assert result.written is True
        assert result.exit_code == 0
        assert result.sections == 8
        assert result.output_path == repo / OUTPUT_FILE
        text = (repo / OUTPUT_FILE).read_text(encoding="utf-8")
        assert "Last sync: 2026-03-14" in text

    def test_overwrites_manual_edits(self, repo: Path):
        (repo / OUTPUT_FILE).write_text("hand-written\n", encoding="utf-8")
        run_sync(repo, today="2026-03-14")
        text = (repo / OUTPUT_FILE).read_text(encoding="utf-8")
        assert "hand-written" not in text
        assert text.startswith("# Fyso Platform")

    def test_same_day_byte_identical(self, repo: Path):
        run_sync(repo, today="2026-03-14")
        first = (repo / OUTPUT_FILE).read_bytes()
        run_sync(repo, today="2026-03-14")
        assert (repo / OUTPUT_FILE).read_bytes() == first

    def test_missing_sources_still_written(self, empty_repo: Path):
        result = run_sync(empty_repo, today="2026-03-14")
        assert result.exit_code == 0
        text = (empty_repo / OUTPUT_FILE).read_text(encoding="utf-8")
        assert text.count("> Source file not found:") == 8


class TestRunSyncCheck:
    def test_up_to_date_after_generate(self, repo: Path):
        run_sync(repo, today="2026-03-14")
        result = run_sync(repo, check=True, today="2026-03-14")
        assert result.up_to_date is True
        assert result.exit_code == 0

    def test_up_to_date_on_another_day(self, repo: Path):
        run_sync(repo, today="2026-03-14")
        result = run_sync(repo, check=True, today="2027-01-01")
        assert result.up_to_date is True
        assert result.exit_code == 0

    def test_missing_output_is_stale(self, repo: Path):
        result = run_sync(repo, check=True)
        assert result.output_exists is False
        assert result.up_to_date is False
        assert result.exit_code == 1

    def test_source_change_is_stale(self, repo: Path):
        run_sync(repo, today="2026-03-14")
        source = repo / "skills/fyso-plan/reference/domain-patterns.md"
        source.write_text("## Bakery\n- **panes** — precio\n", encoding="utf-8")
        result = run_sync(repo, check=True, today="2026-03-14")
        assert result.up_to_date is False
        assert result.exit_code == 1

    def test_crlf_output_is_stale(self, repo: Path):
        run_sync(repo, today="2026-03-14")
        out = repo / OUTPUT_FILE
        out.write_bytes(out.read_bytes().replace(b"\n", b"\r\n"))
        result = run_sync(repo, check=True, today="2026-03-14")
        assert result.up_to_date is False
        assert result.exit_code == 1

    def test_check_never_writes(self, repo: Path):
        (repo / OUTPUT_FILE).write_text("stale\n", encoding="utf-8")
        run_sync(repo, check=True)
        assert (repo / OUTPUT_FILE).read_text(encoding="utf-8") == "stale\n"

    def test_check_without_output_creates_nothing(self, repo: Path):
        run_sync(repo, check=True)
        assert not (repo / OUTPUT_FILE).exists()


class TestDescribeSources:
    def test_all_present(self, repo: Path):
        report = describe_sources(repo)
        assert report.present == 8
        assert report.missing == 0
        assert [s.number for s in report.sources] == list(range(1, 9))
        assert all(s.size > 0 for s in report.sources)

    def test_missing_reported(self, make_repo):
        skipped = SECTIONS[5].source
        root = make_repo(skip=(skipped,))
        report = describe_sources(root)
        assert report.missing == 1
        missing = [s for s in report.sources if not s.exists]
        assert missing[0].source == skipped
        assert missing[0].size == 0

    def test_digest(self, empty_repo: Path):
        report = describe_sources(empty_repo)
        assert report.digest == hashlib.sha256().hexdigest()

    def test_to_dict(self, repo: Path):
        d = describe_sources(repo).to_dict()
        assert d["root"] == str(repo)
        assert d["present"] == 8
        assert len(d["sources"]) == 8
        assert d["sources"][0]["title"] == "Field Types"
        assert len(d["digest"]) == 64


class TestSyncLogging:
    def test_reason_logged(self, make_repo, caplog):
        root = make_repo(skip=("skills/fyso-rules/reference/dsl-reference.md",))
        with caplog.at_level("INFO", logger="refsync.core.use_cases.sync"):
            run_sync(root, today="2026-03-14")
        assert "FYSO-REFERENCE.md: Consolidated from 7/8 reference files" in caplog.text
