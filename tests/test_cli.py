import io
import json
import subprocess
import sys

import pytest
from pydantic import ValidationError

from aplusb.cli import main
from aplusb.models.enums import ExitCode


class TestMain:
    """Test the command line entry point"""

    def test_success(self, stdout):
        """Test valid input exits cleanly with the sum on stdout"""
        assert main([], stdin=io.StringIO("3 4\n"), stdout=stdout) == ExitCode.SUCCESS
        assert stdout.getvalue() == "7\n"

    def test_success_is_quiet_on_stderr(self, stdout, capsys):
        """Test nothing is logged at the default level on success"""
        main([], stdin=io.StringIO("3 4\n"), stdout=stdout)
        assert capsys.readouterr().err == ""

    @pytest.mark.parametrize("text,code", [
        ("", "END_OF_INPUT"),
        ("3\n", "MALFORMED_TOKEN_COUNT"),
        ("3 abc\n", "PARSE_FAILURE"),
        ("2147483647 1\n", "INTEGER_OVERFLOW"),
    ])
    def test_failure(self, stdout, capsys, text, code):
        """Test input errors exit with failure and log the error code"""
        assert main([], stdin=io.StringIO(text), stdout=stdout) == ExitCode.FAILURE
        assert stdout.getvalue() == ""
        err = capsys.readouterr().err
        assert "Summation failed" in err
        assert code in err

    def test_json_diagnostics(self, stdout, capsys):
        """Test --json-logs renders the failure as a JSON event"""
        main(["--json-logs"], stdin=io.StringIO("3 abc\n"), stdout=stdout)
        event = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert event["event"] == "Summation failed"
        assert event["code"] == "PARSE_FAILURE"
        assert event["details"] == {"token": "abc"}
        assert event["level"] == "error"

    def test_all_lines_flag(self, stdout):
        """Test --all-lines sums every line"""
        assert main(["--all-lines"], stdin=io.StringIO("1 2\n3 4\n"), stdout=stdout) == ExitCode.SUCCESS
        assert stdout.getvalue() == "3\n7\n"

    def test_all_lines_from_environment(self, stdout, monkeypatch):
        """Test APLUSB_ALL_LINES enables all-lines mode"""
        monkeypatch.setenv("APLUSB_ALL_LINES", "true")
        main([], stdin=io.StringIO("1 2\n3 4\n"), stdout=stdout)
        assert stdout.getvalue() == "3\n7\n"

    def test_debug_logging(self, stdout, capsys):
        """Test --log-level is case-insensitive and enables debug events"""
        main(["--log-level", "debug"], stdin=io.StringIO("3 4\n"), stdout=stdout)
        assert "Line summed" in capsys.readouterr().err

    def test_log_level_from_environment(self, stdout, capsys, monkeypatch):
        """Test a lowercase APLUSB_LOG_LEVEL configures logging"""
        monkeypatch.setenv("APLUSB_LOG_LEVEL", "debug")
        assert main([], stdin=io.StringIO("3 4\n"), stdout=stdout) == ExitCode.SUCCESS
        assert stdout.getvalue() == "7\n"
        assert "Line summed" in capsys.readouterr().err

    def test_invalid_log_level_from_environment(self, stdout, monkeypatch):
        """Test an unknown APLUSB_LOG_LEVEL is reported as a settings error"""
        monkeypatch.setenv("APLUSB_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError, match="log_level"):
            main([], stdin=io.StringIO("3 4\n"), stdout=stdout)
        assert stdout.getvalue() == ""

    def test_unknown_option(self, capsys):
        """Test an unknown flag is an argparse usage error"""
        with pytest.raises(SystemExit) as exc_info:
            main(["--bogus"])
        assert exc_info.value.code == 2


class TestProcess:
    """Test the program as a separate process"""

    def run_module(self, text):
        return subprocess.run(
            [sys.executable, "-m", "aplusb"],
            input=text,
            capture_output=True,
            text=True,
            timeout=30
        )

    def test_sum(self):
        """Test the module sums stdin"""
        result = self.run_module("-5 5\n")
        assert result.returncode == 0
        assert result.stdout == "0\n"

    def test_abort_on_malformed_input(self):
        """Test malformed input exits with status 1 and nothing on stdout"""
        result = self.run_module("3\n")
        assert result.returncode == 1
        assert result.stdout == ""
        assert "MALFORMED_TOKEN_COUNT" in result.stderr
