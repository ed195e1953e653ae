from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Dict, Optional

from .config import ensure_defaults, load_config
from .environment import BootMode
from .logging_utils import configure_logging
from .resolver import detect_efi_environment

logger = logging.getLogger(__name__)


def _merge_args(cfg: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    # CLI flags override the config file.
    for key in ("arch", "firmware_dir", "log_path"):
        value = getattr(args, key)
        if value:
            cfg[key] = value
    # --no-<flag> can switch off a mode enabled in the config file.
    for key in ("secure_boot", "sev", "cca"):
        value = getattr(args, key)
        if value is not None:
            cfg[key] = value
    return cfg


def run(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Resolve the firmware environment described by *cfg* and report the selected mode."""

    env = detect_efi_environment(cfg["arch"], cfg["firmware_dir"])
    mode = BootMode.from_flags(
        bool(cfg.get("secure_boot")),
        bool(cfg.get("sev")),
        bool(cfg.get("cca")),
    )
    pair = env.pair(mode)
    if not pair.bootable:
        logger.warning("Boot mode %s is not available in %s", mode.value, env.firmware_dir)

    report = env.as_dict()
    report["selected"] = {"mode": mode.value, "code": pair.code, "vars": pair.vars, "bootable": pair.bootable}
    return report


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="efi-env")
    p.add_argument("--config", default=None, help="Path to config file (json|yaml)")
    p.add_argument("--arch", default=None, help="Guest architecture (arm64 selects AAVMF); defaults to host")
    p.add_argument("--firmware-dir", dest="firmware_dir", default=None, help="Directory holding OVMF/AAVMF images")
    p.add_argument("--log", dest="log_path", default=None, help="Also write the log to this file")
    p.add_argument("--secure-boot", dest="secure_boot", action=argparse.BooleanOptionalAction, default=None, help="Select the Secure Boot pair")
    p.add_argument("--sev", action=argparse.BooleanOptionalAction, default=None, help="Select the SEV pair")
    p.add_argument("--cca", action=argparse.BooleanOptionalAction, default=None, help="Select the CCA pair")
    p.add_argument("--json", action="store_true", help="Print the full environment as JSON")
    p.add_argument("--verbose", "-v", action="store_true", help="Log every probe")

    args = p.parse_args(argv)

    cfg = load_config(args.config) if args.config else {}
    cfg = ensure_defaults(_merge_args(cfg, args))

    if args.verbose:
        level = logging.DEBUG
    elif cfg.get("log_path"):
        level = logging.INFO
    else:
        level = logging.WARNING
    configure_logging(log_path=cfg.get("log_path"), level=level)

    try:
        report = run(cfg)
    except Exception:
        logger.exception("Firmware resolution failed")
        raise

    selected = report["selected"]
    if args.json:
        print(json.dumps(report, indent=2, sort_keys=True))
    else:
        print(f"mode: {selected['mode']}")
        print(f"code: {selected['code']}")
        print(f"vars: {selected['vars']}")
        print(f"bootable: {'yes' if selected['bootable'] else 'no'}")

    return 0 if selected["bootable"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
