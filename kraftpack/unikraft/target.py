"""Build target value objects.

A target pairs an architecture with a platform and records the packaging
format and kernel artifacts produced for that pair. Targets are Components
and can be handed directly to a package manager's ``pack``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class ArchitectureConfig:
    """CPU architecture a target is built for."""

    name: str
    kconfig: Dict[str, str] = field(default_factory=dict)


@dataclass
class PlatformConfig:
    """Platform (hypervisor or host environment) a target runs on."""

    name: str
    kconfig: Dict[str, str] = field(default_factory=dict)


@dataclass
class TargetConfig:
    """A single architecture/platform build target."""

    name: str
    architecture: ArchitectureConfig
    platform: PlatformConfig
    kconfig: Dict[str, str] = field(default_factory=dict)
    format_name: str = ""  # desired packaging format
    kernel: str = ""
    kernel_dbg: str = ""  # unstripped kernel
    initrd: Optional[str] = None
    command: List[str] = field(default_factory=list)

    @property
    def source(self) -> str:
        return ""

    @property
    def version(self) -> str:
        return ""

    @property
    def path(self) -> str:
        return ""

    @property
    def is_unpacked(self) -> bool:
        return False

    def arch_plat_string(self) -> str:
        """Return the canonical ``<platform>-<architecture>`` name."""
        return f"{self.platform.name}-{self.architecture.name}"

    def merged_kconfig(self) -> Dict[str, str]:
        """Return target kconfig overridden by architecture, then platform values."""
        values: Dict[str, str] = {}
        values.update(self.kconfig)
        values.update(self.architecture.kconfig)
        values.update(self.platform.kconfig)
        return values


def kernel_name(target: TargetConfig) -> str:
    """Return the kernel image name for a target.

    Follows the ``<name>_<platform>-<architecture>`` pattern used by the
    Unikraft build system.

    Args:
        target: Target to name

    Returns:
        Kernel image file name

    Raises:
        ValueError: If the target has no name
    """
    if not target.name:
        raise ValueError("target name not set, cannot determine binary name")

    return f"{target.name}_{target.platform.name}-{target.architecture.name}"


def kernel_dbg_name(target: TargetConfig) -> str:
    """Return the name of the symbolic (unstripped) kernel image."""
    return f"{kernel_name(target)}.dbg"


def parse_target(target_def: Union[str, Dict[str, Any]], default_name: str = "") -> TargetConfig:
    """Parse a target definition from a Kraftfile.

    Accepts either the short ``"<platform>/<architecture>"`` string form or
    a mapping with ``architecture`` and ``platform`` keys.

    Args:
        target_def: Target definition
        default_name: Name used when the definition does not set one

    Returns:
        TargetConfig instance

    Raises:
        ValueError: If the definition lacks an architecture or platform
    """
    if isinstance(target_def, str):
        plat, sep, arch = target_def.partition("/")
        if not sep or not plat or not arch:
            raise ValueError(f"Invalid target {target_def!r}: expected 'platform/architecture'")
        return TargetConfig(
            name=default_name,
            architecture=ArchitectureConfig(name=arch),
            platform=PlatformConfig(name=plat),
        )

    arch = target_def.get("architecture") or target_def.get("arch")
    plat = target_def.get("platform") or target_def.get("plat")
    if not arch or not plat:
        raise ValueError(f"Target definition requires architecture and platform: {target_def}")

    return TargetConfig(
        name=target_def.get("name", default_name),
        architecture=ArchitectureConfig(name=arch),
        platform=PlatformConfig(name=plat),
        kconfig={str(k): str(v) for k, v in (target_def.get("kconfig") or {}).items()},
        format_name=target_def.get("format", ""),
        kernel=target_def.get("kernel", ""),
        kernel_dbg=target_def.get("kernel_dbg", ""),
        initrd=target_def.get("initrd"),
        command=list(target_def.get("command") or []),
    )
