import argparse
import sys
from dataclasses import dataclass

from psadt_launcher.shared.config.models import LOG_LEVELS
from psadt_launcher.shared.models import DeploymentRequest

_OPTIONS = ("-Install", "-Uninstall", "-TargetProcess", "-DoNotDisturb", "-ForceInteractive", "-LogLevel")
_SWITCHES = ("-Install", "-Uninstall", "-DoNotDisturb", "-ForceInteractive")
_CANONICAL = {o.lstrip("-").lower(): o for o in _OPTIONS}
_TRUE = ("true", "$true", "1")
_FALSE = ("false", "$false", "0")


@dataclass
class RunMode:
    request: DeploymentRequest
    log_level: str | None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="psadt-launcher", allow_abbrev=False)
    p.add_argument("-Install", dest="install", action="store_true")
    p.add_argument("-Uninstall", dest="uninstall", action="store_true")
    p.add_argument("-TargetProcess", dest="target_process", default="")
    p.add_argument("-DoNotDisturb", dest="do_not_disturb", action="store_true")
    p.add_argument("-ForceInteractive", dest="force_interactive", action="store_true")
    p.add_argument("-LogLevel", dest="log_level", type=str.upper, choices=LOG_LEVELS, default=None)
    return p


def _switch_value(option: str, value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{option} 的取值无效: {value!r} (应为 $true/$false)")


def normalize_argv(argv: list[str]) -> list[str]:
    """PowerShell 风格参数: 不区分大小写, 支持 --flag 与 -Flag:value

    开关参数的 -Switch:$false 会被丢弃, 非布尔取值抛出 ValueError.
    """
    out: list[str] = []
    for tok in argv:
        if not tok.startswith("-"):
            out.append(tok)
            continue
        name, sep, value = tok.lstrip("-").partition(":")
        canonical = _CANONICAL.get(name.lower())
        if canonical is None:
            out.append(tok)
            continue
        if sep and canonical in _SWITCHES:
            if _switch_value(canonical, value):
                out.append(canonical)
            continue
        out.append(canonical)
        if sep:
            out.append(value)
    return out


def parse_mode(argv: list[str] | None = None) -> RunMode:
    raw = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    try:
        normalized = normalize_argv(raw)
    except ValueError as err:
        parser.error(str(err))
    args = parser.parse_args(normalized)
    request = DeploymentRequest(
        target_process=(args.target_process or "").strip(),
        install=args.install,
        uninstall=args.uninstall,
        do_not_disturb=args.do_not_disturb,
        force_interactive=args.force_interactive,
    )
    return RunMode(request=request, log_level=args.log_level)
