"""Exceptions raised by the zypper client."""


class ZypperError(Exception):
    """Base class for all errors raised by pyzypper."""


class ZypperNotFoundError(ZypperError, FileNotFoundError):
    """The zypper binary could not be located or is not runnable."""

    def __init__(self, path: str | None = None):
        self.path = path
        if path:
            message = f"zypper binary not found or not runnable: {path}"
        else:
            message = "zypper binary not found in PATH"
        super().__init__(message)


class EmptyNameError(ZypperError, ValueError):
    """An empty name was given where a package name is required."""

    def __init__(self):
        super().__init__("name cannot be empty")


class SubCommandError(ZypperError):
    """zypper exited with a non-zero status while running a sub-command."""

    def __init__(self, sub_command: str, returncode: int, stderr: bytes = b""):
        self.sub_command = sub_command
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.decode(errors="replace").strip()
        message = (
            f"failed to run zypper sub-command: {sub_command}: "
            f"exit status {returncode}"
        )
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class SearchError(ZypperError):
    """zypper search failed for a reason not otherwise classified."""

    def __init__(self, name: str, cause: Exception | None = None):
        self.name = name
        self.cause = cause
        message = f"failed to search for package {name}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class InstallError(ZypperError):
    """zypper install failed for a reason not otherwise classified."""

    def __init__(self, name: str, cause: Exception | None = None):
        self.name = name
        self.cause = cause
        message = f"failed to install package {name}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class NoMatchingItemError(ZypperError, LookupError):
    """No package matches the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no matching item found: {name}")


class RootPrivilegesError(ZypperError, PermissionError):
    """Root privileges are required to run the sub-command."""

    def __init__(self, sub_command: str):
        self.sub_command = sub_command
        super().__init__(f"root privileges required to run command: {sub_command}")


class DecodeError(ZypperError, ValueError):
    """zypper output could not be decoded into the expected shape."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"failed to decode zypper XML output: {reason}")


class CommandCancelledError(ZypperError, TimeoutError):
    """The deadline for a sub-command expired before zypper exited."""

    def __init__(self, sub_command: str, timeout: float):
        self.sub_command = sub_command
        self.timeout = timeout
        super().__init__(
            f"zypper sub-command {sub_command} cancelled after {timeout}s deadline"
        )
