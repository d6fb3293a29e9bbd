from __future__ import annotations

import subprocess
from collections.abc import Callable
from typing import Any, Protocol

from loguru import logger

from psadt_launcher.shared.config.models import LauncherSettings
from psadt_launcher.shared.models import DeployMode, DeploymentType, InvocationResult


class DeploymentInvoker(Protocol):
    def invoke(self, deployment_type: DeploymentType, deploy_mode: DeployMode) -> InvocationResult: ...


class SessionLauncherInvoker:
    """通过 ServiceUI 在用户会话中启动 PSADT"""

    def __init__(self, settings: LauncherSettings, runner: Callable[..., Any] = subprocess.run):
        self.settings = settings
        self._runner = runner

    def build_command(self, deployment_type: DeploymentType, deploy_mode: DeployMode) -> list[str]:
        s = self.settings
        return [
            str(s.session_launcher),
            f"-process:{s.session_process}",
            str(s.deployment_executable),
            "-DeploymentType",
            deployment_type.value,
            "-DeployMode",
            deploy_mode.value,
        ]

    def invoke(self, deployment_type: DeploymentType, deploy_mode: DeployMode) -> InvocationResult:
        cmd = self.build_command(deployment_type, deploy_mode)
        logger.debug("启动命令: {}", subprocess.list2cmdline(cmd))
        try:
            proc = self._runner(cmd, check=False)
        except (OSError, subprocess.SubprocessError) as err:
            msg = f"{type(err).__name__}: {err}"
            return InvocationResult(exit_code=self.settings.launch_failure_exit_code, message=msg)
        code = getattr(proc, "returncode", None)
        return InvocationResult(exit_code=int(code) if code is not None else 0)
