"""Shared utilities for pyzypper."""

from pyzypper.util.logging import setup_logging

__all__ = ["setup_logging"]
