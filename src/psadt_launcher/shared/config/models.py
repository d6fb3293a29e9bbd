from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from psadt_launcher.shared.basic_dir import (
    APP_NAME,
    deployment_executable_path,
    logs_dir,
    session_launcher_path,
)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class LauncherSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    script_version: str = "1.0.0"
    log_dir: Path = Field(default_factory=logs_dir)
    log_name: str = APP_NAME
    log_level: str = "INFO"
    log_keep_files: int = 7
    session_launcher: Path = Field(default_factory=session_launcher_path)
    session_process: str = "explorer.exe"
    deployment_executable: Path = Field(default_factory=deployment_executable_path)
    launch_failure_exit_code: int = 0
    enable_eventlog: bool = False

    @field_validator("log_level", mode="before")
    def _validate_level(cls, v: str | None) -> str:
        s = str(v or "INFO").strip().upper()
        if s not in LOG_LEVELS:
            raise ValueError(f"未知日志级别: {v}")
        return s

    @field_validator("log_keep_files")
    def _validate_keep(cls, v: int) -> int:
        return max(1, int(v))
