"""
Command result domain entity.
"""

from dataclasses import dataclass


@dataclass
class CommandResult:
    """Output of a single command run through a command runner."""

    stdout: str = ""
    stderr: str = ""
    exit_status: int = 0

    @property
    def success(self) -> bool:
        return self.exit_status == 0

    def __str__(self) -> str:
        """String representation of the CommandResult."""
        return f"CommandResult(exit_status={self.exit_status}, stdout={len(self.stdout)} chars)"
