"""Package operations: searching and installing packages with zypper."""

from typing import TYPE_CHECKING, Callable

from pyzypper.config import Config
from pyzypper.decode import decode_search_results
from pyzypper.errors import (
    EmptyNameError,
    InstallError,
    NoMatchingItemError,
    RootPrivilegesError,
    SearchError,
    SubCommandError,
    ZypperError,
)
from pyzypper.models import Package

if TYPE_CHECKING:
    from pyzypper.client import Client

COMMAND_SEARCH = "search"
COMMAND_INSTALL = "install"

# Exit code -> error factory, taking the target package name.
SEARCH_EXIT_CODES: dict[int, Callable[[str], ZypperError]] = {
    Config.EXIT_NO_MATCHING_ITEM: NoMatchingItemError,
}

INSTALL_EXIT_CODES: dict[int, Callable[[str], ZypperError]] = {
    Config.EXIT_ROOT_PRIVILEGES: lambda name: RootPrivilegesError(COMMAND_INSTALL),
    Config.EXIT_NO_MATCHING_ITEM: NoMatchingItemError,
}


def classify_exit(
    error: SubCommandError,
    name: str,
    exit_codes: dict[int, Callable[[str], ZypperError]],
    fallback: Callable[[str, SubCommandError], ZypperError],
) -> ZypperError:
    """Map a failed sub-command to the error reported to the caller.

    Args:
        error: The error raised by the process runner.
        name: Package name the sub-command was run for.
        exit_codes: Known exit codes for the sub-command.
        fallback: Error factory for exit codes not in ``exit_codes``. It is
            given the name and ``error`` so the message can carry both.

    Returns:
        The classified error. The caller chains it to ``error``.
    """
    factory = exit_codes.get(error.returncode)
    if factory is None:
        return fallback(name, error)
    return factory(name)


class PackageService:
    """Handles all operations related to packages."""

    def __init__(self, client: "Client"):
        self.client = client

    async def search(self, name: str, timeout: float | None = None) -> list[Package]:
        """Search for a package in all configured repositories.

        Args:
            name: Name or pattern to search for.
            timeout: Deadline in seconds for zypper to finish.

        Returns:
            Matching packages in the order zypper reported them.

        Raises:
            EmptyNameError: If ``name`` is empty. zypper is not run.
            NoMatchingItemError: If nothing matches ``name``.
            SearchError: If zypper fails for any other reason.
            DecodeError: If zypper's output cannot be decoded.
            CommandCancelledError: If the deadline expires.
        """
        if not name:
            raise EmptyNameError()

        try:
            output = await self.client.do(
                COMMAND_SEARCH, "--details", name, timeout=timeout
            )
        except SubCommandError as e:
            raise classify_exit(e, name, SEARCH_EXIT_CODES, SearchError) from e

        return decode_search_results(output)

    async def install(
        self, name: str, *args: str, timeout: float | None = None
    ) -> None:
        """Install a package from the configured repositories.

        Args:
            name: Package selector passed to zypper install.
            *args: Extra arguments appended after ``name``, verbatim.
            timeout: Deadline in seconds for zypper to finish.

        Raises:
            EmptyNameError: If ``name`` is empty. zypper is not run.
            RootPrivilegesError: If zypper needs root privileges.
            NoMatchingItemError: If nothing matches ``name``.
            InstallError: If zypper fails for any other reason.
            CommandCancelledError: If the deadline expires.
        """
        if not name:
            raise EmptyNameError()

        try:
            await self.client.do(COMMAND_INSTALL, name, *args, timeout=timeout)
        except SubCommandError as e:
            raise classify_exit(e, name, INSTALL_EXIT_CODES, InstallError) from e

