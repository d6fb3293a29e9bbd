from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "PSADT-Launcher"
SESSION_LAUNCHER_NAME = "ServiceUI.exe"
DEPLOYMENT_EXECUTABLE_NAME = "Invoke-AppDeployToolkit.exe"


def data_dir() -> Path:
    base = os.environ.get("ProgramData") or str(Path.home())
    return Path(base) / APP_NAME


def logs_dir() -> Path:
    return data_dir() / "Logs"


def package_dir() -> Path:
    """Intune 内容目录 (运行时的工作目录)"""
    return Path.cwd()


def session_launcher_path() -> Path:
    return package_dir() / SESSION_LAUNCHER_NAME


def deployment_executable_path() -> Path:
    return package_dir() / DEPLOYMENT_EXECUTABLE_NAME
