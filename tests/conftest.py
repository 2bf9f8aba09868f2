"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from fileprobe.container import DependencyContainer
from fileprobe.entities.CommandResult import CommandResult
from fileprobe.ports.backend.command_runner_port import CommandRunnerPort


class FakeCommandRunner(CommandRunnerPort):
    """Command runner answering from a table of scripted command results."""

    def __init__(self):
        self.responses: dict[str, CommandResult] = {}
        self.commands: list[str] = []
        self.closed = False

    def respond(self, command: str, stdout: str = "", stderr: str = "", exit_status: int = 0):
        self.responses[command] = CommandResult(
            stdout=stdout, stderr=stderr, exit_status=exit_status
        )

    def run_command(self, command: str) -> CommandResult:
        self.commands.append(command)
        # unknown commands behave like a shell reporting "command failed"
        return self.responses.get(command, CommandResult(stdout="", stderr="", exit_status=1))

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_runner():
    """
    Create a scripted command runner.

    Returns:
        FakeCommandRunner with no scripted responses
    """
    return FakeCommandRunner()


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing local file inspection.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        test_file = os.path.join(temp_dir, "test1.txt")
        with open(test_file, "w") as f:
            f.write("This is a test file.")

        with open(os.path.join(temp_dir, "empty.txt"), "w"):
            pass

        os.makedirs(os.path.join(temp_dir, "subdir"))

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger, fake_runner):
    """
    Create a dependency container wired to the fake command runner.

    Returns:
        DependencyContainer instance with mocked logger and runner
    """
    container = DependencyContainer()
    container._logger = mock_logger
    container._instances["command_runner"] = fake_runner
    return container
