# src/pyzypper/config.py

"""Centralized configuration for pyzypper.

This module provides the constants that describe how zypper is located and
invoked, plus the exit codes the client interprets.
"""

import os


class Config:
    """Library-wide configuration settings."""

    BINARY_NAME: str = "zypper"
    """Canonical name of the zypper executable looked up in PATH."""

    ZYPPER_PATH: str | None = os.getenv("PYZYPPER_ZYPPER_PATH") or None
    """Explicit path to the zypper executable.

    Can be set with the PYZYPPER_ZYPPER_PATH environment variable. An explicit
    path passed to the client takes precedence. Default: unset (PATH lookup).
    """

    GLOBAL_FLAGS: tuple[str, ...] = (
        "--quiet",
        "--non-interactive",
        "--non-interactive-include-reboot-patches",
        "--xmlout",
    )
    """Flags placed before every sub-command, in this order."""

    EXIT_ROOT_PRIVILEGES: int = 5
    """Exit code zypper uses when root privileges are required."""

    EXIT_NO_MATCHING_ITEM: int = 104
    """Exit code zypper uses when no item matches the given name."""
