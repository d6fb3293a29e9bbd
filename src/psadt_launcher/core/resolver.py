from __future__ import annotations

from psadt_launcher.shared.errors import ConflictingModeError, DeferredError
from psadt_launcher.shared.models import DeploymentDecision, DeploymentRequest, DeployMode, DeploymentType


class DeploymentModeResolver:
    """根据请求参数与目标进程状态决定部署类型和部署模式

    不保存任何状态, 相同输入总是得到相同结果.
    """

    def validate(self, request: DeploymentRequest) -> None:
        if request.install and request.uninstall:
            raise ConflictingModeError()

    def resolve(self, request: DeploymentRequest, is_process_running: bool) -> DeploymentDecision:
        self.validate(request)
        if is_process_running and request.do_not_disturb:
            raise DeferredError(request.target_process)
        deployment_type = DeploymentType.UNINSTALL if request.uninstall else DeploymentType.INSTALL
        if is_process_running or request.force_interactive:
            deploy_mode = DeployMode.INTERACTIVE
        else:
            deploy_mode = DeployMode.SILENT
        return DeploymentDecision(deployment_type=deployment_type, deploy_mode=deploy_mode)
