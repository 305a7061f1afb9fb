"""Tests for CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

from rainalert.cli import main
from rainalert.config.loader import ConfigError
from rainalert.models.forecast import ForecastDecision
from rainalert.models.run import RunResult, RunStatus


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_validate_config(self, config_yaml_path: Path, capsys):
        result = main(["--config", str(config_yaml_path), "validate-config"])
        assert result == 0
        captured = capsys.readouterr()
        assert "America/Los_Angeles" in captured.out
        assert "0,3" in captured.out
        assert "San Francisco" in captured.out

    def test_validate_invalid_config(self, tmp_path: Path, capsys):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("latitude: 100\n")
        result = main(["--config", str(config_path), "validate-config"])
        assert result == 1
        captured = capsys.readouterr()
        assert "Invalid config" in captured.out

    def test_config_show(self, config_yaml_path: Path, capsys):
        result = main(["--config", str(config_yaml_path), "config", "show"])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["ntfy_times"] == [0, 3]
        assert data["ntfy_topic"] == "weather-updates"

    def test_config_without_subcommand(self, config_yaml_path: Path, capsys):
        assert main(["--config", str(config_yaml_path), "config"]) == 1

    def test_config_from_env(self, config_yaml_path: Path, monkeypatch, capsys):
        monkeypatch.setenv("CONFIG_PATH", str(config_yaml_path))
        assert main(["validate-config"]) == 0

    def test_run_done(self, config_yaml_path: Path, capsys):
        done = RunResult(
            status=RunStatus.DONE,
            decision=ForecastDecision(rain_expected=True, peak_precipitation_in=0.25),
            notified=True,
        )
        with patch("rainalert.cli.run_job", return_value=done) as run:
            result = main(["--config", str(config_yaml_path), "run", "--force"])
        assert result == 0
        run.assert_called_once_with(str(config_yaml_path), force=True)
        captured = capsys.readouterr()
        assert "Status: done" in captured.out
        assert "0.25" in captured.out

    def test_run_failed(self, tmp_path: Path, capsys):
        failed = RunResult(status=RunStatus.FAILED, error=ConfigError("latitude: too big"))
        with patch("rainalert.cli.run_job", return_value=failed):
            result = main(["--config", str(tmp_path / "x.yaml"), "run"])
        assert result == 1
        assert "latitude: too big" in capsys.readouterr().out
