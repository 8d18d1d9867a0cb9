"""Locating and running the zypper executable.

This module resolves the zypper binary, builds invocations with the global
flags every sub-command needs, and runs them as child processes. Arguments
are passed as an argument vector; no shell is involved and no argument is
sanitized, so callers are responsible for what they pass.
"""

import asyncio
import os
import shutil
import signal
import subprocess
from typing import Protocol, Sequence

from pyzypper.config import Config
from pyzypper.errors import CommandCancelledError, SubCommandError, ZypperNotFoundError


def locate_executable(path: str | None = None) -> str:
    """Resolve the zypper executable and check that it runs.

    Args:
        path: Explicit path to the binary. Used verbatim when given, otherwise
            the binary is looked up in PATH under its canonical name.

    Returns:
        The resolved path to the zypper binary.

    Raises:
        ZypperNotFoundError: If the binary cannot be found, or if running it
            without arguments fails (broken symlink, not executable, ...).
    """
    if not path:
        path = shutil.which(Config.BINARY_NAME)
        if path is None:
            raise ZypperNotFoundError()

    try:
        subprocess.run(
            [path],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        raise ZypperNotFoundError(path) from e

    return path


def build_command(path: str, sub_command: str, args: Sequence[str] = ()) -> list[str]:
    """Build the argument vector for a zypper sub-command.

    Args:
        path: Path to the zypper binary.
        sub_command: Sub-command to run (e.g., 'search').
        args: Arguments appended verbatim after the sub-command.

    Returns:
        The full argument vector, starting with the binary path.
    """
    return [path, *Config.GLOBAL_FLAGS, sub_command, *args]


class ProcessRunner(Protocol):
    """Runs a zypper sub-command and returns its standard output."""

    async def run(
        self,
        path: str,
        sub_command: str,
        args: Sequence[str] = (),
        timeout: float | None = None,
    ) -> bytes: ...


class SubprocessRunner:
    """ProcessRunner backed by asyncio child processes."""

    async def run(
        self,
        path: str,
        sub_command: str,
        args: Sequence[str] = (),
        timeout: float | None = None,
    ) -> bytes:
        """Run a zypper sub-command and wait for it to exit.

        Args:
            path: Path to the zypper binary.
            sub_command: Sub-command to run.
            args: Arguments appended after the sub-command.
            timeout: Deadline in seconds. None waits indefinitely.

        Returns:
            Standard output exactly as produced, when zypper exits with 0.

        Raises:
            SubCommandError: If zypper exits with a non-zero status.
            CommandCancelledError: If the deadline expires first. The child
                and its process group are killed and reaped before this is
                raised.
            asyncio.CancelledError: If the calling task is cancelled. The
                child and its process group are killed and reaped before it
                propagates.
        """
        process = await asyncio.create_subprocess_exec(
            *build_command(path, sub_command, args),
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=True,
        )

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout)
        except asyncio.TimeoutError:
            await _kill(process)
            raise CommandCancelledError(sub_command, timeout) from None
        except asyncio.CancelledError:
            await _kill(process)
            raise

        if process.returncode != 0:
            raise SubCommandError(sub_command, process.returncode, stderr)

        return stdout


async def _kill(process: asyncio.subprocess.Process) -> None:
    """Kill a child and everything it spawned, then wait for it.

    zypper runs rpm and other helpers that inherit its pipes, so killing only
    the direct child would leave the pipes open until the helpers exit.
    """
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        # The whole group already exited.
        pass
    await process.wait()
