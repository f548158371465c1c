"""kraftpack: pluggable package management for unikernel builds."""

__version__ = "0.1.0"
