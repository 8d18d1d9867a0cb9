"""A client for openSUSE's zypper package manager.

Wraps the zypper command-line tool: builds its invocations, runs it, and
decodes its XML output into typed records.
"""

import asyncio

from pyzypper.client import Client
from pyzypper.errors import (
    CommandCancelledError,
    DecodeError,
    EmptyNameError,
    InstallError,
    NoMatchingItemError,
    RootPrivilegesError,
    SearchError,
    SubCommandError,
    ZypperError,
    ZypperNotFoundError,
)
from pyzypper.models import Package, PackageKind, PackageStatus, Repository


async def search(name: str, timeout: float | None = None) -> list[Package]:
    """Search for a package using a client with the default configuration."""
    if not name:
        raise EmptyNameError()
    client = await asyncio.to_thread(Client)
    return await client.package.search(name, timeout=timeout)


async def install(name: str, *args: str, timeout: float | None = None) -> None:
    """Install a package using a client with the default configuration."""
    if not name:
        raise EmptyNameError()
    client = await asyncio.to_thread(Client)
    await client.package.install(name, *args, timeout=timeout)


__all__ = [
    "Client",
    "CommandCancelledError",
    "DecodeError",
    "EmptyNameError",
    "InstallError",
    "NoMatchingItemError",
    "Package",
    "PackageKind",
    "PackageStatus",
    "Repository",
    "RootPrivilegesError",
    "SearchError",
    "SubCommandError",
    "ZypperError",
    "ZypperNotFoundError",
    "install",
    "search",
]
