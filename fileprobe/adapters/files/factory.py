"""
Factory choosing the File implementation for a target's OS family.
"""

import logging
from typing import Optional

from fileprobe.adapters.files.bsd_file import BsdFile
from fileprobe.adapters.files.linux_file import LinuxFile
from fileprobe.adapters.files.local_file import LocalFile
from fileprobe.adapters.files.qnx_file import QnxFile
from fileprobe.adapters.files.unix_file import UnixFile
from fileprobe.adapters.files.windows_file import WindowsFile
from fileprobe.entities.File import File
from fileprobe.exceptions import CommandExecutionError, UnsupportedPlatformError
from fileprobe.ports.backend.command_runner_port import CommandRunnerPort

FILE_CLASSES: dict[str, type[File]] = {
    "linux": LinuxFile,
    "unix": UnixFile,
    "bsd": BsdFile,
    "windows": WindowsFile,
    "qnx": QnxFile,
    "local": LocalFile,
}

FAMILY_ALIASES = {
    "darwin": "bsd",
    "macos": "bsd",
    "freebsd": "bsd",
    "openbsd": "bsd",
    "netbsd": "bsd",
    "dragonfly": "bsd",
}

BSD_KERNELS = ("darwin", "freebsd", "openbsd", "netbsd", "dragonfly")


def normalize_os_family(os_family: str) -> str:
    """
    Resolve aliases and validate an OS family name.

    Raises:
        UnsupportedPlatformError: If the family has no File implementation
    """
    family = os_family.strip().lower()
    if family == "auto":
        return family
    family = FAMILY_ALIASES.get(family, family)
    if family not in FILE_CLASSES:
        raise UnsupportedPlatformError(f"Unsupported OS family: {os_family}")
    return family


class FileFactory:
    """Build File entities bound to one command runner."""

    def __init__(
        self,
        backend: CommandRunnerPort,
        os_family: str = "auto",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the factory.

        Args:
            backend: Command runner shared by every File the factory creates
            os_family: One of FILE_CLASSES, an alias, or "auto" to ask the target
            logger: Logger instance to use for logging
        """
        self._backend = backend
        self._os_family = normalize_os_family(os_family)
        self._logger = logger or logging.getLogger(__name__)

    @property
    def os_family(self) -> str:
        """The OS family of the target, detecting it on first use if needed."""
        if self._os_family == "auto":
            self._os_family = self.detect_os_family()
        return self._os_family

    def detect_os_family(self) -> str:
        """
        Ask the target for its kernel name with uname.

        Returns:
            The detected family; hosts without uname are taken to be Windows
        """
        try:
            result = self._backend.run_command("uname -s")
        except CommandExecutionError as e:
            self._logger.warning(f"uname failed, assuming Windows: {e}")
            return "windows"

        kernel = result.stdout.strip().lower()
        if result.exit_status != 0 or not kernel:
            family = "windows"
        elif kernel == "linux":
            family = "linux"
        elif kernel.startswith("qnx"):
            family = "qnx"
        elif kernel in BSD_KERNELS:
            family = "bsd"
        else:
            family = "unix"

        self._logger.info(f"Detected OS family {family} (uname: {kernel or 'n/a'})")
        return family

    def create(self, path: str, follow_symlink: bool = True) -> File:
        """
        Create a File for a path on the target.

        Args:
            path: Path of the file on the target
            follow_symlink: Describe the link target instead of the link itself

        Returns:
            File implementation matching the target's OS family
        """
        file_class = FILE_CLASSES[self.os_family]
        return file_class(self._backend, path, follow_symlink)
