"""
Local command runner implementation using subprocess.
"""

import logging
import subprocess
import sys
from typing import Optional, Sequence

from typing_extensions import override

from fileprobe.entities.CommandResult import CommandResult
from fileprobe.exceptions import CommandExecutionError
from fileprobe.ports.backend.command_runner_port import CommandRunnerPort

POSIX_SHELL = ("/bin/sh", "-c")
POWERSHELL = ("powershell.exe", "-NoProfile", "-NonInteractive", "-Command")


class LocalCommandRunner(CommandRunnerPort):
    """Run commands on this machine through sh, or PowerShell on Windows."""

    def __init__(
        self,
        timeout: Optional[float] = 30.0,
        shell: Optional[Sequence[str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the runner.

        Args:
            timeout: Seconds to wait for each command (None = no timeout)
            shell: Shell invocation the command is appended to. Defaults to
                PowerShell on Windows and /bin/sh elsewhere.
            logger: Logger instance to use for logging
        """
        self._timeout = timeout
        if shell is None:
            shell = POWERSHELL if sys.platform == "win32" else POSIX_SHELL
        self._shell = tuple(shell)
        self._logger = logger or logging.getLogger(__name__)

    @override
    def run_command(self, command: str) -> CommandResult:
        self._logger.debug(f"Running local command: {command}")
        try:
            proc = subprocess.run(
                [*self._shell, command],
                capture_output=True,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            raise CommandExecutionError(
                f"Command timed out after {self._timeout}s: {command}"
            )
        except OSError as e:
            raise CommandExecutionError(f"Failed to run command {command}: {e}")

        return CommandResult(
            stdout=proc.stdout.decode("utf-8", errors="replace"),
            stderr=proc.stderr.decode("utf-8", errors="replace"),
            exit_status=proc.returncode,
        )
