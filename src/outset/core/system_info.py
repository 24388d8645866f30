"""Host information queries.

Used for the debug system report and to find out who is sitting at the
console when running as root at login.
"""

import getpass
import platform
import re
from abc import ABC, abstractmethod

from outset.core.subprocess import run_subprocess_with_context

SERIAL_UNKNOWN = "Serial Unknown"

_SERIAL_RE = re.compile(r'"IOPlatformSerialNumber"\s*=\s*"([^"]*)"')


class SystemInfo(ABC):
    """Abstract interface for host information."""

    @abstractmethod
    def hardware_model(self) -> str:
        """Hardware model identifier, e.g. ``MacBookPro18,3``.

        Raises:
            RuntimeError: If the model cannot be queried
        """
        ...

    @abstractmethod
    def serial_number(self) -> str:
        """Serial number, or ``SERIAL_UNKNOWN``."""
        ...

    @abstractmethod
    def os_version(self) -> str:
        """Dotted OS version, e.g. ``14.2.1``."""
        ...

    @abstractmethod
    def build_version(self) -> str:
        """OS build, e.g. ``23C71``.

        Raises:
            RuntimeError: If the build cannot be queried
        """
        ...

    @abstractmethod
    def console_user(self) -> str:
        """Name of the user logged in at the console."""
        ...


def parse_serial_number(ioreg_output: str) -> str:
    match = _SERIAL_RE.search(ioreg_output)
    if match is None or not match.group(1).strip():
        return SERIAL_UNKNOWN
    return match.group(1).strip()


class RealSystemInfo(SystemInfo):
    """Production implementation using sysctl, ioreg and stat."""

    def hardware_model(self) -> str:
        result = run_subprocess_with_context(
            ["/usr/sbin/sysctl", "-n", "hw.model"],
            operation_context="read hardware model",
        )
        return result.stdout.strip()

    def serial_number(self) -> str:
        try:
            result = run_subprocess_with_context(
                ["/usr/sbin/ioreg", "-c", "IOPlatformExpertDevice", "-d", "2"],
                operation_context="read serial number",
            )
        except RuntimeError:
            return SERIAL_UNKNOWN
        return parse_serial_number(result.stdout)

    def os_version(self) -> str:
        release, _, _ = platform.mac_ver()
        return release or platform.release()

    def build_version(self) -> str:
        result = run_subprocess_with_context(
            ["/usr/sbin/sysctl", "-n", "kern.osversion"],
            operation_context="read OS build version",
        )
        return result.stdout.strip()

    def console_user(self) -> str:
        try:
            result = run_subprocess_with_context(
                ["/usr/bin/stat", "-f", "%Su", "/dev/console"],
                operation_context="read console user",
            )
        except RuntimeError:
            return getpass.getuser()
        return result.stdout.strip() or getpass.getuser()
