from __future__ import annotations

import logging
import platform

logger = logging.getLogger(__name__)


def normalize_arch(machine: str) -> str:
    m = machine.lower()
    return {
        "x86_64": "amd64",
        "amd64": "amd64",
        "aarch64": "arm64",
        "arm64": "arm64",
        "armv7l": "armhf",
        "armv6l": "armhf",
    }.get(m, m)


def host_arch() -> str:
    """Architecture of the running host, in launcher naming (amd64/arm64/...)."""

    machine = platform.machine()
    arch = normalize_arch(machine)
    logger.debug("Host arch: machine=%s arch=%s", machine, arch)
    return arch
