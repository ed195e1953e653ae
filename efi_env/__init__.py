"""UEFI firmware environment detection for VM launchers.

Core design goals:
- Presence detection only (no firmware parsing)
- Fresh filesystem probe per resolution, no caching
- Architecture-aware filename selection
- Absence is structural (empty path), never an exception
"""

from __future__ import annotations

from .environment import BootMode, EFIEnvironment, FirmwarePair
from .resolver import detect_efi_environment

__all__ = [
    "BootMode",
    "EFIEnvironment",
    "FirmwarePair",
    "detect_efi_environment",
]
