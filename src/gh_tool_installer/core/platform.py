"""Local platform description used to pick release assets."""

import platform
from dataclasses import dataclass

_ARCH_ALIASES: dict[str, str] = {
    "x86_64": "x86_64",
    "aarch64": "aarch64",
    "arm64": "aarch64",
}


def normalize_arch(machine: str) -> str | None:
    """Map a machine name onto the supported architecture set.

    Args:
        machine: Raw machine name, e.g. from platform.machine()

    Returns:
        ``x86_64`` or ``aarch64``, None when unsupported

    """
    return _ARCH_ALIASES.get(machine.lower())


@dataclass(slots=True, frozen=True)
class PlatformDescriptor:
    """Operating system and architecture of the install target.

    Attributes:
        os_name: Lower-cased system name (``linux``, ``darwin``)
        arch: Normalized architecture, None when unsupported

    """

    os_name: str
    arch: str | None

    @classmethod
    def from_values(cls, system: str, machine: str) -> "PlatformDescriptor":
        """Build a descriptor from raw system and machine names."""
        return cls(os_name=system.lower(), arch=normalize_arch(machine))

    @classmethod
    def detect(cls) -> "PlatformDescriptor":
        """Describe the running host."""
        return cls.from_values(platform.system(), platform.machine())

    @property
    def is_supported(self) -> bool:
        """Return whether the architecture has prebuilt assets."""
        return self.arch is not None

    def __str__(self) -> str:
        return f"{self.os_name}/{self.arch or 'unsupported'}"
