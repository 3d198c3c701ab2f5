"""Tests for the llmdoc command line."""

import json

import pytest
from unittest.mock import patch

from conftest import write
from llmdoc.cli import build_parser, main


@pytest.fixture
def config(tmp_path):
    """Settings file pointing the store into tmp_path, file logging off."""
    path = tmp_path / "llmdoc.env"
    path.write_text(f"STORE_DIR={tmp_path}/store\nLOG_FILE=\n")
    return path


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("llmdoc.cli.setup_logging") as mock_setup:
        yield mock_setup


def run(config, *argv):
    return main(["--config", str(config), *argv])


class TestParser:
    """Test build_parser."""

    def test_migrate_defaults(self):
        args = build_parser().parse_args(["migrate"])
        assert args.docs_dir is None
        assert args.dry_run is False
        assert args.no_progress is False

    def test_list_rejects_unknown_kind(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["list", "epics"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMigrateCommand:
    """Test llmdoc migrate."""

    def test_migrates_corpus(self, corpus, config, tmp_path, capsys):
        assert run(config, "migrate", str(corpus), "--no-progress") == 0

        out = capsys.readouterr().out
        assert "Tasks: 2 found, 2 migrated" in out
        assert (tmp_path / "store" / "tasks" / "TASK-001.json").exists()

    def test_dry_run_writes_nothing(self, corpus, config, tmp_path, capsys):
        assert run(config, "migrate", str(corpus), "--dry-run", "--no-progress") == 0

        assert "This was a DRY RUN" in capsys.readouterr().out
        assert not (tmp_path / "store").exists()

    def test_missing_docs_dir(self, config, tmp_path, capsys):
        assert run(config, "migrate", str(tmp_path / "nowhere")) == 1
        assert "Documentation directory not found" in capsys.readouterr().out

    def test_unreadable_source_exits_nonzero(self, corpus, config, capsys):
        (corpus / "agile" / "tasks.md").write_bytes(b"\xff\xfe")
        assert run(config, "migrate", str(corpus), "--no-progress") == 1
        assert "ERROR: Migration aborted" in capsys.readouterr().out

    def test_record_errors_still_exit_zero(self, corpus, config, capsys):
        write(corpus / "agile" / "sprints" / "sprint-current-plan.md", "# Now\n")
        assert run(config, "migrate", str(corpus), "--no-progress") == 0
        assert "Errors encountered (1):" in capsys.readouterr().out

    def test_bad_config_exits_2(self, tmp_path):
        bad = tmp_path / "bad.env"
        bad.write_text("store_dir=/tmp/x\n")
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(bad), "migrate"])
        assert exc.value.code == 2

    def test_verbose_passed_to_logging(self, corpus, config, no_logging_setup):
        main(["--config", str(config), "-v", "migrate", str(corpus), "--no-progress"])
        assert no_logging_setup.call_args.kwargs["verbose"] is True
        assert no_logging_setup.call_args.kwargs["log_file"] is None


class TestRecordCommands:
    """Test llmdoc list and llmdoc show."""

    @pytest.fixture(autouse=True)
    def migrated(self, corpus, config, capsys):
        run(config, "migrate", str(corpus), "--no-progress")
        capsys.readouterr()

    def test_list(self, config, capsys):
        assert run(config, "list", "tasks") == 0
        out = capsys.readouterr().out
        assert "TASK-001" in out and "TASK-002" in out
        assert "2 tasks" in out

    def test_list_status_filter_any_spelling(self, config, capsys):
        assert run(config, "list", "tasks", "--status", "In-Progress") == 0
        out = capsys.readouterr().out
        assert "TASK-001" in out
        assert "TASK-002" not in out

    def test_list_unknown_status(self, config, capsys):
        assert run(config, "list", "tasks", "--status", "sideways") == 1
        assert "Unknown task status 'sideways'" in capsys.readouterr().out

    def test_list_empty_kind(self, config, tmp_path, capsys):
        other = tmp_path / "other.env"
        other.write_text(f"STORE_DIR={tmp_path}/empty\nLOG_FILE=\n")
        assert run(other, "list", "adrs") == 0
        assert "No adrs found." in capsys.readouterr().out

    def test_show(self, config, capsys):
        assert run(config, "show", "adrs", "ADR001") == 0
        record = json.loads(capsys.readouterr().out)
        assert record["title"] == "Use JSON files for storage"
        assert record["status"] == "accepted"

    def test_show_missing(self, config, capsys):
        assert run(config, "show", "tasks", "TASK-404") == 1
        assert "tasks/TASK-404 not found" in capsys.readouterr().out

    def test_show_unsafe_id(self, config, capsys):
        assert run(config, "show", "tasks", "../x") == 1
        assert "ERROR: Unsafe record id" in capsys.readouterr().out
