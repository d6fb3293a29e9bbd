from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    CONFLICTING_MODE = 1
    INVALID_SETTINGS = 3
    DEFERRED = 60012  # 通知 Intune 稍后重试


class LauncherError(Exception):
    exit_code: int = 1


class ConflictingModeError(LauncherError):
    exit_code = ExitCode.CONFLICTING_MODE

    def __init__(self, message: str = "不能同时指定 -Install 和 -Uninstall"):
        super().__init__(message)


class DeferredError(LauncherError):
    exit_code = ExitCode.DEFERRED

    def __init__(self, target_process: str):
        super().__init__(f"目标进程 {target_process} 正在运行且已启用 DoNotDisturb, 推迟部署")
        self.target_process = target_process
