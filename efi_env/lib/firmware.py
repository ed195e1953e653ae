from __future__ import annotations

import logging
import os
from typing import Callable, Dict, Tuple

from ..environment import BootMode

logger = logging.getLogger(__name__)

EFI_CODE = "OVMF_CODE.fd"
EFI_VARS = "OVMF_VARS.fd"
EFI_CODE_AARCH64 = "AAVMF_CODE.fd"
EFI_VARS_AARCH64 = "AAVMF_VARS.fd"
EFI_CODE_SECURE_BOOT = "OVMF_CODE.secboot.fd"
EFI_VARS_SECURE_BOOT = "OVMF_VARS.secboot.fd"
EFI_CODE_SEV = "OVMF_CODE.cc.fd"
EFI_VARS_SEV = EFI_VARS
EFI_CODE_AARCH64_CCA = "AAVMF_CODE.cca.fd"
EFI_VARS_AARCH64_CCA = "AAVMF_VARS.cca.fd"

ARCH_ARM64 = "arm64"
ARCH_X86 = "x86"

SLOT_CODE = "code"
SLOT_VARS = "vars"

FilenameTable = Dict[Tuple[str, BootMode, str], str]
Probe = Callable[[str], bool]

# Modes without an entry are not wired for that architecture.
FIRMWARE_FILENAMES: FilenameTable = {
    (ARCH_ARM64, BootMode.STANDARD, SLOT_CODE): EFI_CODE_AARCH64,
    (ARCH_ARM64, BootMode.STANDARD, SLOT_VARS): EFI_VARS_AARCH64,
    (ARCH_ARM64, BootMode.CCA, SLOT_CODE): EFI_CODE_AARCH64_CCA,
    (ARCH_ARM64, BootMode.CCA, SLOT_VARS): EFI_VARS_AARCH64_CCA,
    (ARCH_X86, BootMode.STANDARD, SLOT_CODE): EFI_CODE,
    (ARCH_X86, BootMode.STANDARD, SLOT_VARS): EFI_VARS,
    (ARCH_X86, BootMode.SECURE_BOOT, SLOT_CODE): EFI_CODE_SECURE_BOOT,
    (ARCH_X86, BootMode.SECURE_BOOT, SLOT_VARS): EFI_VARS_SECURE_BOOT,
    (ARCH_X86, BootMode.SEV, SLOT_CODE): EFI_CODE_SEV,
    (ARCH_X86, BootMode.SEV, SLOT_VARS): EFI_VARS_SEV,
}


def arch_family(arch: str) -> str:
    """Only the exact "arm64" identifier selects AAVMF; everything else is OVMF."""

    return ARCH_ARM64 if arch == ARCH_ARM64 else ARCH_X86


def probe(path: str) -> bool:
    """Return True if *path* can be stat'ed.

    Permission and I/O errors are reported as absence, same as ENOENT.
    So are paths os.stat refuses outright (embedded NUL).
    """

    try:
        os.stat(path)
    except OSError as e:
        logger.debug("Firmware binary absent: %s (%s)", path, e.strerror or e.__class__.__name__)
        return False
    except ValueError as e:
        logger.debug("Firmware binary absent: %r (%s)", path, e)
        return False
    logger.debug("Firmware binary found: %s", path)
    return True


def firmware_binary_if_exists(firmware_dir: str, binary: str, *, probe: Probe = probe) -> str:
    full_path = os.path.join(firmware_dir, binary)
    if probe(full_path):
        return full_path
    return ""
