from __future__ import annotations

from typing import Protocol

import psutil
from loguru import logger


class ProcessInspector(Protocol):
    def is_running(self, process_name: str) -> bool: ...


def normalize_process_name(name: str | None) -> str:
    n = str(name or "").strip().lower()
    if n.endswith(".exe"):
        n = n[: -len(".exe")]
    return n


class PsutilProcessInspector:
    def is_running(self, process_name: str) -> bool:
        target = normalize_process_name(process_name)
        if not target:
            return False
        try:
            for p in psutil.process_iter(attrs=["name"]):
                n = p.info.get("name")
                if n and normalize_process_name(n) == target:
                    logger.debug("发现目标进程: name={} pid={}", n, p.pid)
                    return True
        except (psutil.Error, OSError) as err:
            # 查询失败按未运行处理
            logger.warning("枚举进程失败: target={} err={}", target, str(err))
            return False
        return False
