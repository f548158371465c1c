"""Base classes and protocols for package managers.

Defines the interface that every package manager (including the umbrella)
must implement, along with the value objects passed through it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, runtime_checkable

from .context import Context
from .errors import UnknownPackageManagerError

ContextKey = str


@runtime_checkable
class Component(Protocol):
    """A buildable unit consumed by ``pack`` and produced by ``unpack``."""

    @property
    def name(self) -> str: ...


@runtime_checkable
class Package(Protocol):
    """A distributable artifact produced by ``pack`` and consumed by ``unpack``."""

    @property
    def name(self) -> str: ...


@dataclass
class CatalogQuery:
    """Filter passed unmodified to every manager's ``catalog``."""

    name: Optional[str] = None
    version: Optional[str] = None
    source: Optional[str] = None
    types: List[str] = field(default_factory=list)
    no_cache: bool = False


@dataclass
class PackOptions:
    """Resolved options for a single ``pack`` call."""

    flatten: bool = False
    output: Optional[str] = None


@dataclass
class UnpackOptions:
    """Resolved options for a single ``unpack`` call."""

    workdir: Optional[str] = None


PackOption = Callable[[PackOptions], None]
UnpackOption = Callable[[UnpackOptions], None]


def with_flatten(flatten: bool = True) -> PackOption:
    """Collapse a component and its sub-components into a single package."""

    def apply(opts: PackOptions) -> None:
        opts.flatten = flatten

    return apply


def with_output(output: str) -> PackOption:
    """Write the produced package to ``output``."""

    def apply(opts: PackOptions) -> None:
        opts.output = output

    return apply


def with_workdir(workdir: str) -> UnpackOption:
    """Unpack into ``workdir``."""

    def apply(opts: UnpackOptions) -> None:
        opts.workdir = workdir

    return apply


def apply_pack_options(*opts: PackOption) -> PackOptions:
    resolved = PackOptions()
    for opt in opts:
        opt(resolved)
    return resolved


def apply_unpack_options(*opts: UnpackOption) -> UnpackOptions:
    resolved = UnpackOptions()
    for opt in opts:
        opt(resolved)
    return resolved


class PackageManager(ABC):
    """Abstract base class for package managers.

    Each package manager handles one package format and must implement
    methods for:
    - Refreshing its cache of upstream catalog sources
    - Adding and removing catalog sources
    - Packing components and unpacking packages
    - Querying its catalog
    - Detecting whether it can handle a source

    Every operation receives a Context which must be passed on verbatim
    to any nested call.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the unique format identifier (e.g., 'oci', 'tar')."""
        pass

    @abstractmethod
    def update(self, ctx: Context) -> None:
        """Retrieve and store locally a cache of the upstream catalog.

        Args:
            ctx: Operation context
        """
        pass

    @abstractmethod
    def add_source(self, ctx: Context, source: str) -> None:
        """Register a catalog source with this manager.

        Args:
            ctx: Operation context
            source: Source location (URL, path, registry reference)
        """
        pass

    @abstractmethod
    def remove_source(self, ctx: Context, source: str) -> None:
        """Deregister a catalog source from this manager.

        Args:
            ctx: Operation context
            source: Source location previously added
        """
        pass

    @abstractmethod
    def pack(self, ctx: Context, component: Component, *opts: PackOption) -> List[Package]:
        """Turn a component into distributable packages.

        Since components can comprise other components, more than one
        package may be returned unless ``with_flatten()`` is given.

        Args:
            ctx: Operation context
            component: Component to pack
            *opts: Pack options

        Returns:
            List of produced packages
        """
        pass

    @abstractmethod
    def unpack(self, ctx: Context, package: Package, *opts: UnpackOption) -> List[Component]:
        """Turn a package into usable components.

        Args:
            ctx: Operation context
            package: Package to unpack
            *opts: Unpack options

        Returns:
            List of components contained in the package
        """
        pass

    @abstractmethod
    def catalog(self, ctx: Context, query: CatalogQuery) -> List[Package]:
        """List packages known to this manager matching ``query``.

        Args:
            ctx: Operation context
            query: Catalog filter

        Returns:
            List of matching packages
        """
        pass

    @abstractmethod
    def is_compatible(self, ctx: Context, source: str) -> "PackageManager":
        """Check whether ``source`` can be handled by this manager.

        Args:
            ctx: Operation context
            source: Source to check

        Returns:
            The manager that should be used for ``source``

        Raises:
            Exception: Any exception signals that the source is not compatible
        """
        pass

    def from_format(self, format_name: str) -> "PackageManager":
        """Retrieve a sub-manager by format name.

        Only aggregating managers hold sub-managers; a plain manager
        resolves to itself when the format matches.

        Args:
            format_name: Format identifier to look up

        Returns:
            Matching package manager

        Raises:
            UnknownPackageManagerError: If the format does not match
        """
        if format_name == self.format_name:
            return self
        raise UnknownPackageManagerError(format_name)
