"""Tests for CLI interface."""

from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from modsweep.cli import app

runner = CliRunner()


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "modsweep version" in result.stdout

    def test_version_short_flag(self):
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert "modsweep version" in result.stdout


class TestHelp:
    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--invert" in result.stdout
        assert "--dry-run" in result.stdout


class TestRootResolution:
    def test_missing_directory_exits(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing"), "--yes"])
        assert result.exit_code == 1
        assert "Error getting starting directory" in result.stdout


class TestSweep:
    def test_nothing_found(self, tmp_path):
        result = runner.invoke(app, [str(tmp_path), "--yes"])
        assert result.exit_code == 0
        assert "No node_modules directories found" in result.stdout

    def test_removes_everything_with_yes(self, tmp_path, make_project):
        first = make_project(tmp_path, "a", deps=2)
        second = make_project(tmp_path, "b", deps=1)

        result = runner.invoke(app, [str(tmp_path), "--yes"])

        assert result.exit_code == 0
        assert "Found 2 node_modules directories" in result.stdout
        assert "Total space freed: 0MB" in result.stdout
        assert not first.exists()
        assert not second.exists()

    def test_invert_with_yes_removes_nothing(self, tmp_path, make_project):
        marker = make_project(tmp_path, "a", deps=2)

        result = runner.invoke(app, [str(tmp_path), "--yes", "--invert"])

        assert result.exit_code == 0
        assert "No directories selected for removal" in result.stdout
        assert marker.exists()

    def test_dry_run(self, tmp_path, make_project):
        marker = make_project(tmp_path, "a", deps=2)

        result = runner.invoke(app, [str(tmp_path), "--yes", "--dry-run"])

        assert result.exit_code == 0
        assert "DRY RUN" in result.stdout
        assert marker.exists()

    def test_uses_interactive_selector_without_yes(self, tmp_path, make_project):
        marker = make_project(tmp_path, "a", deps=2)

        with patch("modsweep.tui.TextualSelector.select", return_value=[]) as mock_select:
            result = runner.invoke(app, [str(tmp_path)])

        assert result.exit_code == 0
        mock_select.assert_called_once()
        assert marker.exists()

    def test_defaults_to_current_directory(self, tmp_path, make_project, monkeypatch):
        marker = make_project(tmp_path, "a", deps=1)
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["--yes"])

        assert result.exit_code == 0
        assert not marker.exists()

    def test_failed_removal_is_reported(self, tmp_path, make_project):
        marker = make_project(tmp_path, "a", deps=1)

        with patch(
            "modsweep.deleter.shutil.rmtree",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            result = runner.invoke(app, [str(tmp_path), "--yes"])

        assert result.exit_code == 0
        assert "Error removing" in result.stdout
        assert "Total space freed: 0MB" in result.stdout
        assert marker.exists()


class TestYarnCache:
    def test_dry_run_does_not_run(self, tmp_path):
        with patch("subprocess.run") as mock_run:
            result = runner.invoke(app, [str(tmp_path), "--yes", "--dry-run", "--yarn-cache"])

        assert result.exit_code == 0
        mock_run.assert_not_called()
        assert "Would run 'yarn cache clean --all'" in result.stdout

    def test_runs_with_yes(self, tmp_path):
        with patch("subprocess.run", return_value=MagicMock(returncode=0)) as mock_run:
            result = runner.invoke(app, [str(tmp_path), "--yes", "--yarn-cache"])

        assert result.exit_code == 0
        mock_run.assert_called_once()
        assert "completed successfully" in result.stdout

    def test_declined(self, tmp_path):
        with patch("modsweep.tui.TextualSelector.select", return_value=[]):
            with patch("modsweep.cli.confirm_action", return_value=False):
                with patch("subprocess.run") as mock_run:
                    result = runner.invoke(app, [str(tmp_path), "--yarn-cache"])

        assert result.exit_code == 0
        mock_run.assert_not_called()
        assert "Skipping" in result.stdout

    def test_failure_does_not_change_exit_code(self, tmp_path):
        with patch("subprocess.run", side_effect=FileNotFoundError("yarn")):
            result = runner.invoke(app, [str(tmp_path), "--yes", "--yarn-cache"])

        assert result.exit_code == 0
        assert "yarn not found" in result.stdout
