"""Package manager abstraction for multi-format packaging.

Each package format is handled by a PackageManager registered in a
PackageManagerRegistry. The UmbrellaManager drives every registered
manager at once so callers need not know which format will serve them.
"""

from .base import (
    CatalogQuery,
    Component,
    ContextKey,
    Package,
    PackageManager,
    PackOption,
    PackOptions,
    UnpackOption,
    UnpackOptions,
    apply_pack_options,
    apply_unpack_options,
    with_flatten,
    with_output,
    with_workdir,
)
from .context import Context
from .errors import (
    AlreadyRegisteredError,
    CancelledError,
    ContextError,
    DeadlineExceededError,
    NoCompatibleManagerError,
    PackManagerError,
    UnknownPackageManagerError,
)
from .registry import PackageManagerRegistry, import_manager, load_managers
from .umbrella import UMBRELLA_CONTEXT, UmbrellaManager

__all__ = [
    "AlreadyRegisteredError",
    "CancelledError",
    "CatalogQuery",
    "Component",
    "Context",
    "ContextError",
    "ContextKey",
    "DeadlineExceededError",
    "NoCompatibleManagerError",
    "Package",
    "PackageManager",
    "PackageManagerRegistry",
    "PackManagerError",
    "PackOption",
    "PackOptions",
    "UMBRELLA_CONTEXT",
    "UmbrellaManager",
    "UnknownPackageManagerError",
    "UnpackOption",
    "UnpackOptions",
    "apply_pack_options",
    "apply_unpack_options",
    "import_manager",
    "load_managers",
    "with_flatten",
    "with_output",
    "with_workdir",
]
