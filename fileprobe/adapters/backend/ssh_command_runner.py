"""
SSH command runner implementation using paramiko.
"""

import logging
import socket
from typing import Optional

import paramiko
from typing_extensions import override

from fileprobe.entities.CommandResult import CommandResult
from fileprobe.exceptions import CommandExecutionError
from fileprobe.ports.backend.command_runner_port import CommandRunnerPort


class SshCommandRunner(CommandRunnerPort):
    """Run commands on a remote host over one lazily opened SSH connection."""

    def __init__(
        self,
        host: str,
        port: int = 22,
        username: Optional[str] = None,
        password: Optional[str] = None,
        key_filename: Optional[str] = None,
        timeout: Optional[float] = 30.0,
        logger: Optional[logging.Logger] = None,
    ):
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._key_filename = key_filename
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)
        self._client: Optional[paramiko.SSHClient] = None

    def _connect(self) -> paramiko.SSHClient:
        if self._client is not None:
            return self._client

        client = paramiko.SSHClient()
        client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
        try:
            client.connect(
                self._host,
                port=self._port,
                username=self._username,
                password=self._password,
                key_filename=self._key_filename,
                timeout=self._timeout,
            )
        except (paramiko.SSHException, OSError) as e:
            client.close()
            raise CommandExecutionError(
                f"Cannot connect to {self._host}:{self._port}: {e}"
            )

        self._logger.info(f"Connected to {self._host}:{self._port}")
        self._client = client
        return client

    @override
    def run_command(self, command: str) -> CommandResult:
        client = self._connect()
        self._logger.debug(f"Running command on {self._host}: {command}")
        try:
            _, stdout, stderr = client.exec_command(command, timeout=self._timeout)
            out = stdout.read().decode("utf-8", errors="replace")
            err = stderr.read().decode("utf-8", errors="replace")
            exit_status = stdout.channel.recv_exit_status()
        except socket.timeout:
            raise CommandExecutionError(
                f"Command timed out after {self._timeout}s on {self._host}: {command}"
            )
        except (paramiko.SSHException, OSError) as e:
            raise CommandExecutionError(
                f"Failed to run command on {self._host}: {command}: {e}"
            )

        return CommandResult(stdout=out, stderr=err, exit_status=exit_status)

    @override
    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            self._logger.info(f"Disconnected from {self._host}:{self._port}")
