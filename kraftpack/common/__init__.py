"""Common utilities for kraftpack."""

from .logger import TRACE, setup_logger, get_logger
from .config import load_config, load_typed_config

__all__ = ["TRACE", "get_logger", "load_config", "load_typed_config", "setup_logger"]
