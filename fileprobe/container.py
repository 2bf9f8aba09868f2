"""
Dependency injection container for managing application dependencies.
"""

import logging

from fileprobe.adapters.backend.local_command_runner import LocalCommandRunner
from fileprobe.adapters.files.factory import FileFactory
from fileprobe.config.settings import Settings
from fileprobe.ports.backend.command_runner_port import CommandRunnerPort
from fileprobe.use_cases.files.compute_checksum import ComputeChecksumUseCase
from fileprobe.use_cases.files.inspect_file import InspectFileUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get application settings, read from the environment on first use.

        Returns:
            Settings instance
        """
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def get_command_runner(self) -> CommandRunnerPort:
        """
        Get the command runner for the configured transport.

        Returns:
            CommandRunnerPort implementation

        Raises:
            ConfigurationError: If the SSH transport is selected without a host
        """
        if "command_runner" not in self._instances:
            settings = self.get_settings()
            if settings.transport == "ssh":
                from fileprobe.adapters.backend.ssh_command_runner import (
                    SshCommandRunner,
                )

                runner: CommandRunnerPort = SshCommandRunner(
                    settings.require_ssh_host(),
                    port=settings.ssh_port,
                    username=settings.ssh_user,
                    password=settings.ssh_password,
                    key_filename=settings.ssh_key_file,
                    timeout=settings.command_timeout,
                    logger=self._logger,
                )
            else:
                runner = LocalCommandRunner(
                    timeout=settings.command_timeout, logger=self._logger
                )
            self._instances["command_runner"] = runner
        return self._instances["command_runner"]

    def get_file_factory(self) -> FileFactory:
        """
        Get the File factory bound to the command runner.

        Returns:
            Configured FileFactory
        """
        if "file_factory" not in self._instances:
            self._instances["file_factory"] = FileFactory(
                self.get_command_runner(),
                os_family=self.get_settings().os_family,
                logger=self._logger,
            )
        return self._instances["file_factory"]

    def get_inspect_file_use_case(self) -> InspectFileUseCase:
        """
        Get inspect file use case with injected dependencies.

        Returns:
            Configured InspectFileUseCase
        """
        if "inspect_file_use_case" not in self._instances:
            self._instances["inspect_file_use_case"] = InspectFileUseCase(
                self.get_file_factory(), self._logger
            )
        return self._instances["inspect_file_use_case"]

    def get_compute_checksum_use_case(self) -> ComputeChecksumUseCase:
        """
        Get compute checksum use case with injected dependencies.

        Returns:
            Configured ComputeChecksumUseCase
        """
        if "compute_checksum_use_case" not in self._instances:
            self._instances["compute_checksum_use_case"] = ComputeChecksumUseCase(
                self.get_file_factory(), self._logger
            )
        return self._instances["compute_checksum_use_case"]

    def reset(self):
        """Close the command runner and drop all instances (useful for testing)."""
        runner = self._instances.get("command_runner")
        if runner is not None:
            runner.close()
        self._instances.clear()


# Global container instance
container = DependencyContainer()
