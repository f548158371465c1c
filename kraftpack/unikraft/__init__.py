"""Unikraft build targets and project descriptions."""

from .app import ApplicationConfig, load_application, normalize, normalize_project_name
from .target import (
    ArchitectureConfig,
    PlatformConfig,
    TargetConfig,
    kernel_dbg_name,
    kernel_name,
    parse_target,
)

__all__ = [
    "ApplicationConfig",
    "ArchitectureConfig",
    "PlatformConfig",
    "TargetConfig",
    "kernel_dbg_name",
    "kernel_name",
    "load_application",
    "normalize",
    "normalize_project_name",
    "parse_target",
]
