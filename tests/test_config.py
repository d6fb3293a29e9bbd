"""LauncherSettings defaults and environment overrides."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from psadt_launcher.shared.config.config import load_settings
from psadt_launcher.shared.config.models import LauncherSettings


def test_defaults_point_at_working_directory(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ProgramData", str(tmp_path / "pd"))
    cwd = Path.cwd()
    s = load_settings({})
    assert s.session_launcher == cwd / "ServiceUI.exe"
    assert s.deployment_executable == cwd / "Invoke-AppDeployToolkit.exe"
    assert s.log_dir == tmp_path / "pd" / "PSADT-Launcher" / "Logs"
    assert s.session_process == "explorer.exe"
    assert s.launch_failure_exit_code == 0


def test_environment_overrides():
    s = load_settings(
        {
            "PSADT_LAUNCHER_LOG_DIR": "/var/log/psadt",
            "PSADT_LAUNCHER_LOG_LEVEL": "debug",
            "PSADT_LAUNCHER_LOG_KEEP_FILES": "3",
            "PSADT_LAUNCHER_ENABLE_EVENTLOG": "true",
            "PSADT_LAUNCHER_SCRIPT_VERSION": "2.1.0",
            "PSADT_LAUNCHER_LAUNCH_FAILURE_EXIT_CODE": "",
            "UNRELATED": "x",
        }
    )
    assert s.log_dir == Path("/var/log/psadt")
    assert s.log_level == "DEBUG"
    assert s.log_keep_files == 3
    assert s.enable_eventlog is True
    assert s.script_version == "2.1.0"
    assert s.launch_failure_exit_code == 0


def test_invalid_override_raises():
    with pytest.raises(ValidationError):
        load_settings({"PSADT_LAUNCHER_LOG_LEVEL": "chatty"})


def test_settings_are_immutable():
    s = LauncherSettings()
    with pytest.raises(ValidationError):
        s.log_level = "DEBUG"


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        LauncherSettings(port=1)
