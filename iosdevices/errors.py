# iosdevices/errors.py
from typing import List, Optional, TYPE_CHECKING

from .reporting import Report

if TYPE_CHECKING:
    from .process import Output


class IosDevicesError(Exception):
    """Base exception for all errors in this package."""
    pass


class EnvError(IosDevicesError):
    """Raised when a required environment variable is missing."""
    def __init__(self, name: str):
        super().__init__(f"required environment variable '{name}' is not set")
        self.name = name


class CommandError(IosDevicesError):
    """Raised when a command exits with a non-zero status."""
    def __init__(self, command: List[str], returncode: int, output: Optional['Output'] = None):
        self.command = command
        self.returncode = returncode
        self.output = output
        message = f"command '{' '.join(command)}' exited with status {returncode}"
        if output is not None and output.stderr:
            message += f": {output.stderr.decode('utf-8', errors='replace').strip()}"
        super().__init__(message)


class DeviceListError(IosDevicesError):
    """Raised when the list of connected devices can't be determined."""
    msg = "Failed to detect connected iOS devices"

    def report(self) -> Report:
        return Report.error(self.msg, str(self))


class DetectionFailed(DeviceListError):
    """`ios-deploy` exited non-zero and printed something."""
    def __init__(self, err: CommandError):
        super().__init__(f"Failed to request device list from `ios-deploy`: {err}")
        self.err = err


class InvalidUtf8(DeviceListError):
    """Device info contained bytes that aren't valid UTF-8."""
    def __init__(self, err: UnicodeDecodeError):
        super().__init__(f"Device info contained invalid UTF-8: {err}")
        self.err = err


class ArchInvalid(DeviceListError):
    """A device reported an architecture with no matching target."""
    def __init__(self, arch: str):
        super().__init__(f"{arch!r} isn't a valid target arch.")
        self.arch = arch
