"""Application project loading and normalization.

Loads Kraftfile project descriptions and normalizes them: paths are made
absolute and implicit defaults are injected.
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import yaml

from ..common.logger import get_logger
from .target import TargetConfig, parse_target

logger = get_logger("unikraft.app")

_PROJECT_NAME_CHARS = re.compile(r"[a-z0-9_-]")


@dataclass
class ApplicationConfig:
    """A kraft project."""

    name: str = ""
    working_dir: str = ""
    kraftfiles: List[str] = field(default_factory=list)
    targets: List[TargetConfig] = field(default_factory=list)


def normalize_project_name(name: str) -> str:
    """Reduce a string to a valid project name.

    Lower-cases the input, drops every character outside ``[a-z0-9_-]``
    and strips leading underscores and dashes.
    """
    name = "".join(_PROJECT_NAME_CHARS.findall(name.lower()))
    return name.lstrip("_-")


def normalize(project: ApplicationConfig) -> ApplicationConfig:
    """Normalize a project in place.

    Resolves the working directory and every Kraftfile to absolute paths
    and derives the project name from the working directory when unset.
    Targets without a name inherit the project name.

    Args:
        project: Project to normalize

    Returns:
        The same project, for chaining
    """
    project.working_dir = os.path.abspath(project.working_dir or os.getcwd())
    project.kraftfiles = [os.path.abspath(kraftfile) for kraftfile in project.kraftfiles]

    if not project.name:
        project.name = normalize_project_name(os.path.basename(project.working_dir))

    for target in project.targets:
        if not target.name:
            target.name = project.name

    return project


def load_application(kraftfile: str) -> ApplicationConfig:
    """Load and normalize a project from a YAML Kraftfile.

    Args:
        kraftfile: Path to the Kraftfile

    Returns:
        Normalized ApplicationConfig

    Raises:
        FileNotFoundError: If the Kraftfile doesn't exist
        TypeError: If the Kraftfile root is not a mapping
        ValueError: If a target definition is invalid
        yaml.YAMLError: If the Kraftfile is invalid YAML
    """
    path = Path(kraftfile)
    if not path.exists():
        raise FileNotFoundError(f"Kraftfile not found: {kraftfile}")

    with path.open("r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise TypeError(f"Kraftfile root must be a mapping, got {type(data).__name__}")

    name = normalize_project_name(str(data.get("name") or ""))
    project = ApplicationConfig(
        name=name,
        working_dir=str(path.parent),
        kraftfiles=[str(path)],
        targets=[parse_target(t, default_name=name) for t in data.get("targets") or []],
    )

    logger.debug(f"Loaded project {project.name or path.parent.name} from {kraftfile}")
    return normalize(project)
