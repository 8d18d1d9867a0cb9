"""Client for interacting with the openSUSE package manager."""

import asyncio
import logging

from pyzypper.config import Config
from pyzypper.errors import CommandCancelledError, SubCommandError
from pyzypper.runner import ProcessRunner, SubprocessRunner, locate_executable
from pyzypper.services import PackageService, RepositoryService


class Client:
    """Client for running zypper sub-commands.

    The client resolves the zypper binary once and then runs one child
    process per call. It keeps no state between calls, so a single instance
    can serve concurrent operations.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        path: str | None = None,
        runner: ProcessRunner | None = None,
    ):
        """Initialize the client.

        Args:
            logger: Logger used by the client. If None, nothing is logged.
            path: Path to the zypper binary. Defaults to Config.ZYPPER_PATH,
                then to a PATH lookup.
            runner: Process runner used to run zypper. Defaults to a
                SubprocessRunner.

        Raises:
            ZypperNotFoundError: If zypper cannot be found or does not run.
        """
        self.logger: logging.Logger | None = logger
        self.path: str = locate_executable(path or Config.ZYPPER_PATH)
        self.runner: ProcessRunner = runner or SubprocessRunner()

        self.package = PackageService(self)
        self.repository = RepositoryService(self)

    async def do(
        self, sub_command: str, *args: str, timeout: float | None = None
    ) -> bytes:
        """Run a zypper sub-command with the given arguments.

        Args:
            sub_command: Sub-command to run (e.g., 'search').
            *args: Arguments appended after the sub-command, verbatim.
            timeout: Deadline in seconds. None waits indefinitely.

        Returns:
            zypper's standard output.

        Raises:
            SubCommandError: If zypper exits with a non-zero status.
            CommandCancelledError: If the deadline expires.
        """
        self._log(logging.DEBUG, f"Running zypper {sub_command} with args {args}")

        try:
            return await self.runner.run(self.path, sub_command, args, timeout=timeout)
        except SubCommandError as e:
            self._log(logging.WARNING, str(e))
            raise
        except (CommandCancelledError, asyncio.CancelledError):
            self._log(logging.WARNING, f"zypper {sub_command} cancelled")
            raise

    def _log(self, level: int, message: str) -> None:
        if self.logger is not None:
            self.logger.log(level, message)
