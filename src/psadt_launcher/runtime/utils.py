from __future__ import annotations

import contextlib
import importlib
import platform
import sys
from collections.abc import Callable
from pathlib import Path

from loguru import logger

from psadt_launcher.shared.config.models import LauncherSettings

LOG_FORMAT = (
    "<blue>{time:YYYY-MM-DD HH:mm:ss}</blue> | "
    "<level>{level: <7}</level> | "
    "<magenta>{name}</magenta>:<cyan>{function}</cyan> | "
    "{message}"
)


def prune_logs(logs_dir: Path, log_name: str, keep: int) -> list[Path]:
    files = sorted(logs_dir.glob(f"{log_name}_*.log"), key=lambda p: p.stat().st_mtime, reverse=True)
    removed = []
    for p in files[max(1, keep) :]:
        with contextlib.suppress(OSError):
            p.unlink()
            removed.append(p)
    return removed


def setup_logging(settings: LauncherSettings, file_level: str | None = None) -> Path:
    """配置控制台与按日轮换的追加日志文件, 返回日志文件路径模板"""
    logs_dir = settings.log_dir
    logs_dir.mkdir(parents=True, exist_ok=True)
    logger.remove()
    if sys.stdout is not None:
        logger.add(sys.stdout, level="TRACE", format=LOG_FORMAT, backtrace=True, diagnose=False)
    logfile = logs_dir / (settings.log_name + "_{time:YYYY-MM-DD}.log")
    logger.add(
        str(logfile),
        level=(file_level or settings.log_level),
        encoding="utf-8",
        format=LOG_FORMAT,
        mode="a",
        rotation="00:00",
        backtrace=True,
        diagnose=False,
    )
    prune_logs(logs_dir, settings.log_name, settings.log_keep_files)
    return logfile


def setup_win_eventlog(enable: bool, app_name: str = "PSADT-Launcher") -> Callable[[str], None] | None:
    if (not enable) or platform.system() != "Windows":
        return None
    try:
        win32evtlog = importlib.import_module("win32evtlog")
        win32evtlogutil = importlib.import_module("win32evtlogutil")
    except ImportError:
        logger.warning("未安装 pywin32, 跳过事件日志")
        return None

    with contextlib.suppress(Exception):
        win32evtlogutil.AddSourceToRegistry(app_name)

    def _report_event(text: str):
        et = win32evtlog.EVENTLOG_ERROR_TYPE
        with contextlib.suppress(Exception):
            win32evtlogutil.ReportEvent(app_name, 1000, 0, et, [text])

    def _sink(msg):
        rec = msg.record
        text = rec.get("message", "")
        exc = rec.get("exception")
        if exc and (exc.type or exc.value):
            text = f"{text}\n{getattr(exc.type, '__name__', exc.type)}: {exc.value}"
        _report_event(text)

    logger.add(_sink, level="ERROR")
    return _report_event


def install_global_handlers(report_event: Callable[[str], None] | None) -> None:
    def _excepthook(exc_type, value, tb):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, value, tb)
            return
        try:
            logger.opt(exception=(exc_type, value, tb)).critical("未捕获的异常: {}", value)
        finally:
            if report_event is not None:
                with contextlib.suppress(Exception):
                    report_event(f"未捕获的异常: {value}")

    sys.excepthook = _excepthook
