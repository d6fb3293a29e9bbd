from enum import Enum

from pydantic import BaseModel, ConfigDict


class DeploymentType(str, Enum):
    INSTALL = "Install"
    UNINSTALL = "Uninstall"


class DeployMode(str, Enum):
    INTERACTIVE = "Interactive"
    SILENT = "Silent"


class DeploymentRequest(BaseModel):
    model_config = ConfigDict(frozen=True)
    target_process: str = ""
    install: bool = False
    uninstall: bool = False
    do_not_disturb: bool = False
    force_interactive: bool = False


class DeploymentDecision(BaseModel):
    model_config = ConfigDict(frozen=True)
    deployment_type: DeploymentType
    deploy_mode: DeployMode


class InvocationResult(BaseModel):
    model_config = ConfigDict(frozen=True)
    exit_code: int = 0
    message: str | None = None

    @property
    def launched(self) -> bool:
        return self.message is None
