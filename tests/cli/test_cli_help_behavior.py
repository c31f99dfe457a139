"""
Unit tests for CLI help behavior when commands are called without required arguments.
"""

import subprocess
import sys
from pathlib import Path


class TestCLIHelpBehavior:
    """Test that commands show help when called without required arguments."""

    def _run_command(self, command: list) -> tuple[int, str, str]:
        """Run a CLI command and return exit code, stdout, stderr."""
        result = subprocess.run(
            [sys.executable, "-m", "dpjoins.cli.main"] + command,
            capture_output=True,
            text=True,
            cwd=Path(__file__).parent.parent.parent,
        )
        return result.returncode, result.stdout, result.stderr

    def test_dpjoins_without_command_shows_help(self):
        exit_code, stdout, stderr = self._run_command([])

        assert exit_code == 0
        output = (stdout + stderr).lower()
        assert "path" in output
        assert "filter" in output
        assert "fk-field" in output

    def test_path_without_argument_shows_help(self):
        exit_code, stdout, stderr = self._run_command(["path"])

        assert exit_code == 0
        output = stdout + stderr
        assert "Find the shortest join path between two tables" in output

    def test_filter_without_fields_shows_help(self):
        exit_code, stdout, stderr = self._run_command(["filter", "datapackage.json", "books"])

        assert exit_code == 0
        assert "Usage" in stdout + stderr

    def test_path_runs_end_to_end(self, write_descriptor, chain_descriptor):
        path = write_descriptor(chain_descriptor)

        exit_code, stdout, _ = self._run_command(["path", str(path), "tableA", "tableC", "-r", "tableD"])

        assert exit_code == 0
        assert "tableB.id=tableD.tableB_id" in stdout

    def test_invalid_format_rejected(self, write_descriptor, chain_descriptor):
        path = write_descriptor(chain_descriptor)

        exit_code, stdout, stderr = self._run_command(
            ["path", str(path), "tableA", "tableC", "--format", "xml"]
        )

        assert exit_code != 0
        assert "Invalid format" in stdout + stderr
