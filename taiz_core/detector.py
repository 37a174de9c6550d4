"""Project detection: find which ecosystems a directory belongs to."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .ecosystems import Ecosystem, EcosystemToolchain, ordered_toolchains
from .errors import NoEcosystemDetectedError

__all__ = [
    "DetectedEcosystem",
    "detect_ecosystems",
    "is_polyglot",
    "primary_ecosystem",
    "require_primary",
]


@dataclass(frozen=True)
class DetectedEcosystem:
    """An ecosystem whose marker file was found in the project root."""

    toolchain: EcosystemToolchain
    detected_file: str

    @property
    def ecosystem(self) -> Ecosystem:
        return self.toolchain.ecosystem

    @property
    def name(self) -> str:
        return self.toolchain.ecosystem.value


def detect_ecosystems(root: Path | str) -> list[DetectedEcosystem]:
    """Scan ``root`` (not its children or parents) for marker files.

    Results follow the fixed declaration order node, python, rust, go and
    carry the first marker that matched for each ecosystem.
    """
    base = Path(root)
    detected: list[DetectedEcosystem] = []
    for toolchain in ordered_toolchains():
        for marker in toolchain.marker_files:
            if (base / marker).is_file():
                detected.append(DetectedEcosystem(toolchain=toolchain, detected_file=marker))
                break
    return detected


def primary_ecosystem(root: Path | str) -> DetectedEcosystem | None:
    detected = detect_ecosystems(root)
    return detected[0] if detected else None


def require_primary(root: Path | str, action: str = "continue") -> DetectedEcosystem:
    primary = primary_ecosystem(root)
    if primary is None:
        raise NoEcosystemDetectedError(Path(root), action)
    return primary


def is_polyglot(root: Path | str) -> bool:
    return len(detect_ecosystems(root)) > 1
