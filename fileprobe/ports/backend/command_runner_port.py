"""
Command runner port interface defining the contract for command execution backends.
"""

from abc import ABC, abstractmethod

from fileprobe.entities.CommandResult import CommandResult


class CommandRunnerPort(ABC):
    """Port interface for running commands against a target host."""

    @abstractmethod
    def run_command(self, command: str) -> CommandResult:
        """
        Run a command on the target and wait for it to finish.

        Args:
            command: Command line, passed to the target's shell as-is

        Returns:
            CommandResult with stdout, stderr and exit status

        Raises:
            CommandExecutionError: If the command could not be run at all
        """
        pass

    def close(self) -> None:
        """Release any connection held by the runner."""
        return None
