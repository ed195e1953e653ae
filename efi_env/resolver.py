from __future__ import annotations

import logging
from typing import Optional

from .environment import BootMode, EFIEnvironment, FirmwarePair
from .lib.firmware import (
    ARCH_ARM64,
    FIRMWARE_FILENAMES,
    SLOT_CODE,
    SLOT_VARS,
    FilenameTable,
    Probe,
    arch_family,
    firmware_binary_if_exists,
    probe as default_probe,
)

logger = logging.getLogger(__name__)


def _lookup(
    firmware_dir: str,
    family: str,
    mode: BootMode,
    slot: str,
    *,
    probe: Probe,
    filenames: FilenameTable,
) -> str:
    binary: Optional[str] = filenames.get((family, mode, slot))
    if not binary:
        return ""
    return firmware_binary_if_exists(firmware_dir, binary, probe=probe)


def detect_efi_environment(
    arch: str,
    firmware_dir: str,
    *,
    probe: Probe = default_probe,
    filenames: FilenameTable = FIRMWARE_FILENAMES,
) -> EFIEnvironment:
    """Probe *firmware_dir* for the firmware pairs usable on *arch*.

    Never raises for missing or unreadable binaries: they resolve to "".
    The directory itself is not checked; a missing directory yields an
    environment with nothing bootable.
    """

    family = arch_family(arch)

    def find(mode: BootMode, slot: str) -> str:
        return _lookup(firmware_dir, family, mode, slot, probe=probe, filenames=filenames)

    if family == ARCH_ARM64:
        env = EFIEnvironment(
            standard=FirmwarePair(code=find(BootMode.STANDARD, SLOT_CODE), vars=find(BootMode.STANDARD, SLOT_VARS)),
            cca=FirmwarePair(code=find(BootMode.CCA, SLOT_CODE), vars=find(BootMode.CCA, SLOT_VARS)),
            arch=arch,
            firmware_dir=firmware_dir,
        )
    else:
        code_sb = find(BootMode.SECURE_BOOT, SLOT_CODE)
        vars_sb = find(BootMode.SECURE_BOOT, SLOT_VARS)

        code = find(BootMode.STANDARD, SLOT_CODE)
        vars_ = find(BootMode.STANDARD, SLOT_VARS)
        if not code:
            # Secure Boot capable code still boots with SB disabled when paired with the plain vars.
            code = code_sb

        env = EFIEnvironment(
            standard=FirmwarePair(code=code, vars=vars_),
            secure_boot=FirmwarePair(code=code_sb, vars=vars_sb),
            sev=FirmwarePair(code=find(BootMode.SEV, SLOT_CODE), vars=find(BootMode.SEV, SLOT_VARS)),
            arch=arch,
            firmware_dir=firmware_dir,
        )

    logger.info(
        "EFI environment: arch=%s dir=%s bootable=%s",
        arch,
        firmware_dir,
        ",".join(m.value for m in env.bootable_modes()) or "none",
    )
    return env
