"""Operation context passed to every package manager call.

A Context carries the logger used for trace events plus an optional
deadline and a cancellation flag. Derived contexts share their parent's
cancellation so cancelling a parent stops every child.
"""

import logging
import threading
import time
from typing import Optional

from ..common.logger import get_logger
from .errors import CancelledError, ContextError, DeadlineExceededError


class Context:
    """Cancellation- and deadline-bearing context with an attached logger."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        deadline: Optional[float] = None,
        parent: Optional["Context"] = None,
    ):
        """Initialize a context.

        Args:
            logger: Logger for events emitted under this context
            deadline: Absolute ``time.monotonic()`` deadline, if any
            parent: Context this one was derived from
        """
        self._parent = parent
        self._cancelled = threading.Event()
        if logger is None:
            logger = parent.logger if parent is not None else get_logger("packmanager")
        self._logger = logger
        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)
        self._deadline = deadline

    @classmethod
    def background(cls) -> "Context":
        """Return an empty context that is never cancelled."""
        return cls()

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    def with_logger(self, logger: logging.Logger) -> "Context":
        """Derive a context that logs through ``logger``."""
        return Context(logger=logger, parent=self)

    def with_cancel(self) -> "Context":
        """Derive a context that can be cancelled independently of this one."""
        return Context(parent=self)

    def with_timeout(self, seconds: float) -> "Context":
        """Derive a context whose deadline is ``seconds`` from now."""
        return Context(deadline=time.monotonic() + seconds, parent=self)

    def cancel(self) -> None:
        """Cancel this context and every context derived from it."""
        self._cancelled.set()

    def err(self) -> Optional[ContextError]:
        """Return why the context is done, or None if it is still live."""
        if self._cancelled.is_set():
            return CancelledError()
        if self._parent is not None:
            parent_err = self._parent.err()
            if parent_err is not None:
                return parent_err
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceededError()
        return None

    def done(self) -> bool:
        return self.err() is not None

    def raise_if_done(self) -> None:
        """Raise the context error if the context is cancelled or expired.

        Raises:
            CancelledError: If the context was cancelled
            DeadlineExceededError: If the deadline has passed
        """
        err = self.err()
        if err is not None:
            raise err
