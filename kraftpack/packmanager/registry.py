"""Registry for package managers.

Holds every known package manager under a unique context key. A registry
is constructed once at process start, populated while backends register
themselves, and only read afterwards. Registration is not synchronised:
it must complete before any concurrent fan-out begins.
"""

import importlib
from typing import Dict, Iterator, List, Mapping, Optional

from ..common.logger import get_logger
from .base import ContextKey, PackageManager
from .errors import AlreadyRegisteredError

logger = get_logger("packmanager.registry")


class PackageManagerRegistry:
    """Keyed collection of package managers.

    Keys are unique. Iteration follows registration order unless a
    snapshot is explicitly sorted by key.
    """

    def __init__(self) -> None:
        self._managers: Dict[ContextKey, PackageManager] = {}

    def register(self, key: ContextKey, manager: PackageManager) -> None:
        """Register a package manager under ``key``.

        Args:
            key: Context key identifying the manager
            manager: PackageManager instance to register

        Raises:
            AlreadyRegisteredError: If ``key`` is already present; the
                existing entry is left untouched
        """
        if key in self._managers:
            raise AlreadyRegisteredError(manager.format_name, key=key)

        self._managers[key] = manager
        logger.debug(f"Registered package manager: {manager.format_name} ({key})")

    def snapshot(self, sort_by_key: bool = False) -> Dict[ContextKey, PackageManager]:
        """Return a copy of the current registry contents.

        Args:
            sort_by_key: Order entries by key instead of registration order

        Returns:
            Dictionary mapping key -> manager
        """
        if sort_by_key:
            return {key: self._managers[key] for key in sorted(self._managers)}
        return dict(self._managers)

    def get(self, key: ContextKey) -> Optional[PackageManager]:
        """Get manager by key.

        Args:
            key: Context key

        Returns:
            PackageManager or None if not registered
        """
        return self._managers.get(key)

    def list_keys(self) -> List[ContextKey]:
        return list(self._managers.keys())

    def list_formats(self) -> List[str]:
        return [manager.format_name for manager in self._managers.values()]

    def __contains__(self, key: object) -> bool:
        return key in self._managers

    def __len__(self) -> int:
        return len(self._managers)

    def __iter__(self) -> Iterator[ContextKey]:
        return iter(self.snapshot())


def import_manager(path: str) -> PackageManager:
    """Instantiate a package manager from an import string.

    Args:
        path: ``"module.path:ClassName"`` of a PackageManager subclass

    Returns:
        New instance of the named class

    Raises:
        ValueError: If ``path`` is malformed
        ImportError: If the module cannot be imported
        AttributeError: If the class does not exist in the module
        TypeError: If the class is not a PackageManager
    """
    module_name, sep, class_name = path.partition(":")
    if not sep or not module_name or not class_name:
        raise ValueError(f"Invalid package manager path: {path!r} (expected 'module:Class')")

    module = importlib.import_module(module_name)
    manager_cls = getattr(module, class_name)
    manager = manager_cls()
    if not isinstance(manager, PackageManager):
        raise TypeError(f"{path} is not a PackageManager")
    return manager


def load_managers(registry: PackageManagerRegistry, managers: Mapping[str, str]) -> List[str]:
    """Register the package managers named in configuration.

    Managers whose module cannot be imported are skipped with a warning.

    Args:
        registry: Registry to populate
        managers: Mapping of context key -> ``"module.path:ClassName"``

    Returns:
        Keys that were registered

    Raises:
        AlreadyRegisteredError: If a key is already present in ``registry``
    """
    registered = []
    for key, path in managers.items():
        try:
            manager = import_manager(path)
        except (ImportError, AttributeError) as e:
            logger.warning(f"Could not load package manager {key} from {path}: {e}")
            continue

        registry.register(key, manager)
        logger.info(f"Registered {manager.format_name} package manager")
        registered.append(key)

    return registered
