"""Shared fixtures for launcher tests."""

import sys

import pytest
from loguru import logger

from psadt_launcher.shared.config.models import LauncherSettings
from psadt_launcher.shared.models import InvocationResult


class FakeInspector:
    def __init__(self, running: bool = False):
        self.running = running
        self.calls: list[str] = []

    def is_running(self, process_name: str) -> bool:
        self.calls.append(process_name)
        return self.running


class FakeInvoker:
    def __init__(self, result: InvocationResult | None = None):
        self.result = result or InvocationResult(exit_code=0)
        self.calls: list[tuple] = []

    def invoke(self, deployment_type, deploy_mode) -> InvocationResult:
        self.calls.append((deployment_type, deploy_mode))
        return self.result


@pytest.fixture(autouse=True)
def _isolate_logging():
    """Drop loguru sinks and the excepthook a test may have installed."""
    hook = sys.excepthook
    yield
    logger.remove()
    sys.excepthook = hook


@pytest.fixture
def settings(tmp_path):
    return LauncherSettings(
        log_dir=tmp_path / "Logs",
        session_launcher=tmp_path / "ServiceUI.exe",
        deployment_executable=tmp_path / "Invoke-AppDeployToolkit.exe",
    )


@pytest.fixture
def inspector():
    return FakeInspector()


@pytest.fixture
def invoker():
    return FakeInvoker()
