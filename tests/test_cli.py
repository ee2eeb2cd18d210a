"""
Tests for the command-line interface.
"""

import json

import pytest

from debuglog import cli
from debuglog.config import load_config, save_config
from debuglog.types import LoggerConfig


@pytest.fixture
def config_path(tmp_path):
    """A config file pointing every path into tmp_path."""
    path = tmp_path / "debuglog_config.json"
    save_config(
        LoggerConfig(
            app_name="CliApp",
            log_directory=str(tmp_path / "logs"),
            echo=False,
            preferences_path=str(tmp_path / "prefs.json"),
            mail_recipients="dev@example.com",
        ),
        str(path),
    )
    return str(path)


def write_logs(tmp_path, *names):
    directory = tmp_path / "logs"
    directory.mkdir(exist_ok=True)
    for name in names:
        (directory / name).write_text(f"   10:00:0000 {name}\n", encoding="utf-8")


class TestCommands:
    """Tests for each sub-command."""

    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_init_writes_config(self, tmp_path, capsys):
        """init creates a loadable default config."""
        path = str(tmp_path / "new.json")
        assert cli.main(["--config", path, "init"]) == 0
        assert load_config(path) == LoggerConfig()

    def test_log_creates_file(self, tmp_path, config_path):
        """log appends a categorized entry to a new file."""
        assert cli.main(["--config", config_path, "log", "hello", "--category", "info"]) == 0

        files = list((tmp_path / "logs").iterdir())
        assert len(files) == 1
        assert files[0].name.startswith("CliApp-log-")
        content = files[0].read_text(encoding="utf-8")
        assert content.startswith("ℹ️ ")
        assert content.endswith(" hello\n")

    def test_log_several_parts(self, tmp_path, config_path):
        """Several message parts are flattened."""
        cli.main(["--config", config_path, "log", "a", "b"])
        content = next((tmp_path / "logs").iterdir()).read_text(encoding="utf-8")
        assert content.endswith(" a b \n")

    def test_log_unknown_category(self, config_path, capsys):
        assert cli.main(["--config", config_path, "log", "x", "--category", "loud"]) == 1
        assert "Unknown log category" in capsys.readouterr().err

    def test_list_json(self, tmp_path, config_path, capsys):
        """list --json prints sorted names."""
        write_logs(tmp_path, "CliApp-log-2.txt", "CliApp-log-1.txt")
        assert cli.main(["--config", config_path, "list", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == ["CliApp-log-1.txt", "CliApp-log-2.txt"]

    def test_show_latest(self, tmp_path, config_path, capsys):
        """show without a name prints the newest file."""
        write_logs(tmp_path, "CliApp-log-1.txt", "CliApp-log-2.txt")
        assert cli.main(["--config", config_path, "show"]) == 0
        assert capsys.readouterr().out == "   10:00:0000 CliApp-log-2.txt\n"

    def test_show_nothing(self, config_path, capsys):
        assert cli.main(["--config", config_path, "show"]) == 1

    def test_export_dry_run(self, tmp_path, config_path, capsys):
        """Dry run lists attachments without sending."""
        write_logs(tmp_path, "CliApp-log-1.txt", "CliApp-log-2.txt")
        assert cli.main(["--config", config_path, "export", "all", "--dry-run"]) == 0

        out = capsys.readouterr().out
        assert "To: dev@example.com" in out
        assert "CliApp-log-1.txt" in out
        assert "CliApp-log-2.txt" in out

    def test_export_current_is_newest(self, tmp_path, config_path, capsys):
        """Outside a running app, the current log is the newest file."""
        write_logs(tmp_path, "CliApp-log-1.txt", "CliApp-log-2.txt")
        cli.main(["--config", config_path, "export", "current", "--dry-run"])

        out = capsys.readouterr().out
        assert "CliApp-log-2.txt" in out
        assert "CliApp-log-1.txt" not in out

    def test_export_nothing(self, config_path, capsys):
        assert cli.main(["--config", config_path, "export", "all", "--dry-run"]) == 1
        assert "Nothing to export" in capsys.readouterr().out

    def test_clean_keeps_newest(self, tmp_path, config_path):
        """clean --keep N leaves the N newest files."""
        write_logs(tmp_path, "CliApp-log-1.txt", "CliApp-log-2.txt", "CliApp-log-3.txt")
        assert cli.main(["--config", config_path, "clean", "--keep", "2"]) == 0

        remaining = sorted(p.name for p in (tmp_path / "logs").iterdir())
        assert remaining == ["CliApp-log-2.txt", "CliApp-log-3.txt"]

    def test_clean_keep_zero(self, tmp_path, config_path):
        write_logs(tmp_path, "CliApp-log-1.txt")
        cli.main(["--config", config_path, "clean", "--keep", "0"])
        assert list((tmp_path / "logs").iterdir()) == []

    def test_status(self, tmp_path, config_path, capsys):
        """status reports config and files as JSON."""
        write_logs(tmp_path, "CliApp-log-1.txt")
        assert cli.main(["--config", config_path, "status"]) == 0

        status = json.loads(capsys.readouterr().out)
        assert status["log_files"] == 1
        assert status["latest"] == "CliApp-log-1.txt"
        assert status["config"]["app_name"] == "CliApp"

    def test_bad_config(self, tmp_path, capsys):
        """An invalid config file is reported, not raised."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"smtp_port": 0}))
        assert cli.main(["--config", str(path), "list"]) == 1
        assert "Error loading configuration" in capsys.readouterr().err
