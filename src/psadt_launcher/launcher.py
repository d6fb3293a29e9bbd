from __future__ import annotations

from loguru import logger
from pydantic import ValidationError

from psadt_launcher.core.invoker import DeploymentInvoker, SessionLauncherInvoker
from psadt_launcher.core.process import ProcessInspector, PsutilProcessInspector
from psadt_launcher.core.resolver import DeploymentModeResolver
from psadt_launcher.runtime.mode import parse_mode
from psadt_launcher.runtime.utils import install_global_handlers, setup_logging, setup_win_eventlog
from psadt_launcher.shared.config.config import load_settings
from psadt_launcher.shared.config.models import LauncherSettings
from psadt_launcher.shared.errors import ConflictingModeError, DeferredError, ExitCode


def main(
    argv: list[str] | None = None,
    *,
    settings: LauncherSettings | None = None,
    inspector: ProcessInspector | None = None,
    invoker: DeploymentInvoker | None = None,
) -> int:
    mode = parse_mode(argv)
    try:
        s = settings or load_settings()
    except ValidationError:
        # load_settings 已记录错误详情
        return int(ExitCode.INVALID_SETTINGS)
    logfile = setup_logging(s, file_level=mode.log_level)
    report_event = setup_win_eventlog(s.enable_eventlog, app_name=s.log_name)
    install_global_handlers(report_event)
    logger.info("PSADT 启动器 v{} 启动, 日志: {}", s.script_version, str(logfile))

    request = mode.request
    resolver = DeploymentModeResolver()
    try:
        resolver.validate(request)
        inspector = inspector or PsutilProcessInspector()
        running = inspector.is_running(request.target_process)
        logger.info("目标进程状态: target={} running={}", request.target_process or "<none>", running)
        decision = resolver.resolve(request, running)
    except ConflictingModeError as err:
        logger.error("{}", str(err))
        return int(err.exit_code)
    except DeferredError as err:
        logger.warning("{}", str(err))
        return int(err.exit_code)

    logger.info(
        "DeploymentType: {}, DeployMode: {}, TargetProcess: {}",
        decision.deployment_type.value,
        decision.deploy_mode.value,
        request.target_process,
    )
    invoker = invoker or SessionLauncherInvoker(s)
    result = invoker.invoke(decision.deployment_type, decision.deploy_mode)
    if not result.launched:
        logger.error("部署程序未能启动: {}", result.message)
    logger.info("Exit code: {}", result.exit_code)
    return result.exit_code


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
