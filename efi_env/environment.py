from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List


class BootMode(enum.Enum):
    STANDARD = "standard"
    SECURE_BOOT = "secure_boot"
    SEV = "sev"
    CCA = "cca"

    @classmethod
    def from_flags(cls, secure_boot: bool = False, sev: bool = False, cca: bool = False) -> "BootMode":
        """Map caller flags to a single mode.

        Flags are checked positionally: secure_boot wins over sev, sev over cca.
        Simultaneous flags are accepted; the lower-priority ones are ignored.
        """

        if secure_boot:
            return cls.SECURE_BOOT
        if sev:
            return cls.SEV
        if cca:
            return cls.CCA
        return cls.STANDARD


@dataclass(frozen=True)
class FirmwarePair:
    code: str = ""
    vars: str = ""

    @property
    def bootable(self) -> bool:
        return bool(self.code) and bool(self.vars)


@dataclass(frozen=True)
class EFIEnvironment:
    """Snapshot of the firmware binaries found in one directory.

    Each pair holds resolved paths or "" for binaries that were not found.
    Instances are never mutated; resolve again to observe filesystem changes.
    """

    standard: FirmwarePair = field(default_factory=FirmwarePair)
    secure_boot: FirmwarePair = field(default_factory=FirmwarePair)
    sev: FirmwarePair = field(default_factory=FirmwarePair)
    cca: FirmwarePair = field(default_factory=FirmwarePair)
    arch: str = ""
    firmware_dir: str = ""

    def pair(self, mode: BootMode) -> FirmwarePair:
        return {
            BootMode.STANDARD: self.standard,
            BootMode.SECURE_BOOT: self.secure_boot,
            BootMode.SEV: self.sev,
            BootMode.CCA: self.cca,
        }[mode]

    def bootable(self, secure_boot: bool = False, sev: bool = False, cca: bool = False) -> bool:
        return self.pair(BootMode.from_flags(secure_boot, sev, cca)).bootable

    def efi_code(self, secure_boot: bool = False, sev: bool = False, cca: bool = False) -> str:
        return self.pair(BootMode.from_flags(secure_boot, sev, cca)).code

    def efi_vars(self, secure_boot: bool = False, sev: bool = False, cca: bool = False) -> str:
        return self.pair(BootMode.from_flags(secure_boot, sev, cca)).vars

    def bootable_modes(self) -> List[BootMode]:
        return [m for m in BootMode if self.pair(m).bootable]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "arch": self.arch,
            "firmware_dir": self.firmware_dir,
            "pairs": {
                m.value: {"code": self.pair(m).code, "vars": self.pair(m).vars, "bootable": self.pair(m).bootable}
                for m in BootMode
            },
        }
