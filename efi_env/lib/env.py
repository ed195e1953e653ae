from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Paths:
    firmware_dir: str = "/usr/share/OVMF"


PATHS = Paths()
