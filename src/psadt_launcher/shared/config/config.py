from __future__ import annotations

import os
from collections.abc import Mapping

from loguru import logger

from psadt_launcher.shared.config.models import LauncherSettings

ENV_PREFIX = "PSADT_LAUNCHER_"


def _from_environ(environ: Mapping[str, str]) -> dict:
    """收集 PSADT_LAUNCHER_<FIELD> 形式的环境变量覆盖"""
    overrides = {}
    for name in LauncherSettings.model_fields:
        value = environ.get(ENV_PREFIX + name.upper())
        if value is not None and value != "":
            overrides[name] = value
    return overrides


def load_settings(environ: Mapping[str, str] | None = None) -> LauncherSettings:
    env = os.environ if environ is None else environ
    cfg = _from_environ(env)
    try:
        return LauncherSettings.model_validate(cfg)
    except Exception as err:
        logger.error("配置校验失败: {}", str(err))
        raise
