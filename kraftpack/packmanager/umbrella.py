"""Umbrella package manager.

The umbrella implements the PackageManager interface by fanning every call
out, one manager at a time, over a fresh snapshot of a registry. List
results are concatenated in iteration order. The first exception raised
by any manager aborts the call and is propagated unchanged; results
already collected from earlier managers are discarded.
"""

from typing import Iterator, List

from ..common.logger import TRACE
from .base import (
    CatalogQuery,
    Component,
    ContextKey,
    Package,
    PackageManager,
    PackOption,
    UnpackOption,
)
from .context import Context
from .errors import ContextError, NoCompatibleManagerError, UnknownPackageManagerError
from .registry import PackageManagerRegistry

UMBRELLA_CONTEXT: ContextKey = "umbrella"


class UmbrellaManager(PackageManager):
    """Package manager that cross-manages every registered manager.

    Used to pack, unpack, search and generally manipulate packages of
    multiple formats simultaneously. Holds no state besides the registry
    it reads from.
    """

    def __init__(self, registry: PackageManagerRegistry, sort_by_key: bool = False):
        """Initialize the umbrella.

        Args:
            registry: Registry whose managers are fanned out to
            sort_by_key: Iterate managers in key order instead of
                registration order
        """
        self.registry = registry
        self.sort_by_key = sort_by_key

    @property
    def format_name(self) -> str:
        return UMBRELLA_CONTEXT

    def _managers(self) -> Iterator[PackageManager]:
        # An umbrella registered in its own registry must not recurse.
        for manager in self.registry.snapshot(sort_by_key=self.sort_by_key).values():
            if manager is self:
                continue
            yield manager

    def from_format(self, format_name: str) -> PackageManager:
        for manager in self.registry.snapshot(sort_by_key=self.sort_by_key).values():
            if manager.format_name == format_name:
                return manager

        raise UnknownPackageManagerError(format_name)

    def update(self, ctx: Context) -> None:
        for manager in self._managers():
            ctx.logger.log(TRACE, f"Updating via {manager.format_name}...")
            manager.update(ctx)

    def add_source(self, ctx: Context, source: str) -> None:
        for manager in self._managers():
            ctx.logger.log(TRACE, f"Adding source {source} via {manager.format_name}...")
            manager.add_source(ctx, source)

    def remove_source(self, ctx: Context, source: str) -> None:
        for manager in self._managers():
            ctx.logger.log(TRACE, f"Removing source {source} via {manager.format_name}...")
            manager.remove_source(ctx, source)

    def pack(self, ctx: Context, component: Component, *opts: PackOption) -> List[Package]:
        packages: List[Package] = []
        for manager in self._managers():
            ctx.logger.log(TRACE, f"Packing {component.name} via {manager.format_name}...")
            packages.extend(manager.pack(ctx, component, *opts))

        return packages

    def unpack(self, ctx: Context, package: Package, *opts: UnpackOption) -> List[Component]:
        components: List[Component] = []
        for manager in self._managers():
            ctx.logger.log(TRACE, f"Unpacking {package.name} via {manager.format_name}...")
            components.extend(manager.unpack(ctx, package, *opts))

        return components

    def catalog(self, ctx: Context, query: CatalogQuery) -> List[Package]:
        packages: List[Package] = []
        for manager in self._managers():
            ctx.logger.log(TRACE, f"Querying catalog via {manager.format_name}...")
            packages.extend(manager.catalog(ctx, query))

        return packages

    def is_compatible(self, ctx: Context, source: str) -> PackageManager:
        """Return the first manager, in iteration order, accepting ``source``.

        This is first-match: when several managers claim the same source,
        whichever is iterated first wins.

        Args:
            ctx: Operation context
            source: Source to check

        Returns:
            The manager returned by the first compatible check

        Raises:
            NoCompatibleManagerError: If no manager accepts the source
            ContextError: If a check failed because ``ctx`` is done
        """
        for manager in self._managers():
            try:
                return manager.is_compatible(ctx, source)
            except ContextError:
                raise
            except Exception as e:
                ctx.logger.log(
                    TRACE, f"{manager.format_name} is not compatible with {source}: {e}"
                )

        raise NoCompatibleManagerError(source)
