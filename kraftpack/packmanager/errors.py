"""Exceptions raised by the package manager registry and umbrella."""


class PackManagerError(Exception):
    """Base class for package manager errors."""


class AlreadyRegisteredError(PackManagerError):
    """Raised when a registry key is already taken."""

    def __init__(self, format_name: str, key: str = ""):
        super().__init__(f"package manager already registered: {format_name}")
        self.format_name = format_name
        self.key = key


class UnknownPackageManagerError(PackManagerError):
    """Raised when no registered manager has the requested format."""

    def __init__(self, format_name: str):
        super().__init__(f"unknown package manager: {format_name}")
        self.format_name = format_name


class NoCompatibleManagerError(PackManagerError):
    """Raised when no registered manager accepts a source."""

    def __init__(self, source: str):
        super().__init__(f"cannot find compatible package manager for source: {source}")
        self.source = source


class ContextError(PackManagerError):
    """Base class for context termination errors."""


class CancelledError(ContextError):
    """Raised when an operation's context was cancelled."""

    def __init__(self) -> None:
        super().__init__("context canceled")


class DeadlineExceededError(ContextError):
    """Raised when an operation's context deadline has passed."""

    def __init__(self) -> None:
        super().__init__("context deadline exceeded")
