"""
File domain entity.

A File describes one path on a target host. Every attribute is computed on
access by running commands through the command runner it is bound to; OS
specific subclasses in ``fileprobe.adapters.files`` supply the primitive
attributes, this class derives everything else from them.
"""

import logging
from typing import Any, Optional

from fileprobe.entities.CommandResult import CommandResult
from fileprobe.ports.backend.command_runner_port import CommandRunnerPort

logger = logging.getLogger(__name__)

FILE_TYPES = (
    "file",
    "directory",
    "symlink",
    "socket",
    "pipe",
    "block_device",
    "character_device",
    "unknown",
)

UNIX_MODE_OWNERS = {"all": 0o777, "owner": 0o700, "group": 0o070, "other": 0o007}
UNIX_MODE_TYPES = {"r": 0o444, "w": 0o222, "x": 0o111}


class File:
    """
    Remote file entity.

    Subclasses must implement every primitive attribute. The primitives of
    this class raise NotImplementedError on access, so an incomplete
    subclass fails on the first call to the missing method.
    """

    # these fields should be implemented by every OS specific File
    DATA_FIELDS = (
        "exists",
        "mode",
        "owner",
        "group",
        "uid",
        "gid",
        "content",
        "mtime",
        "size",
        "selinux_label",
        "path",
    )

    supports_mount = False

    def __init__(
        self,
        backend: CommandRunnerPort,
        path: Optional[str],
        follow_symlink: bool = True,
    ):
        """
        Initialize the File entity.

        Args:
            backend: Command runner used for every attribute lookup
            path: Path of the file on the target host
            follow_symlink: Describe the link target instead of the link itself
        """
        self._backend = backend
        self._path = path or ""
        self._follow_symlink = follow_symlink

        self._sanitize_filename(self._path)

    def _sanitize_filename(self, path: str) -> None:
        """Hook for subclasses that need an escaped copy of the path."""
        return None

    @property
    def backend(self) -> CommandRunnerPort:
        return self._backend

    @property
    def follow_symlink(self) -> bool:
        return self._follow_symlink

    def _missing(self, name: str):
        raise NotImplementedError(f"File must implement the {name}() method.")

    def exists(self) -> bool:
        return self._missing("exists")

    def mode(self) -> Optional[int]:
        return self._missing("mode")

    def owner(self) -> Optional[str]:
        return self._missing("owner")

    def group(self) -> Optional[str]:
        return self._missing("group")

    def uid(self) -> Optional[int]:
        return self._missing("uid")

    def gid(self) -> Optional[int]:
        return self._missing("gid")

    def content(self) -> Optional[str]:
        return self._missing("content")

    def mtime(self) -> Optional[int]:
        return self._missing("mtime")

    def size(self) -> Optional[int]:
        return self._missing("size")

    def selinux_label(self) -> Optional[str]:
        return self._missing("selinux_label")

    def type(self) -> str:
        return self._missing("type")

    def link_path(self) -> Optional[str]:
        return self._missing("link_path")

    def serialize(self) -> dict[str, Any]:
        """
        Collect every data field into a plain dictionary.

        Each field costs its own round trip. Errors from the backend propagate
        and no partial result is returned.

        Returns:
            Dictionary keyed by DATA_FIELDS plus "type" and "follow_symlink"
        """
        res: dict[str, Any] = {field: getattr(self, field)() for field in self.DATA_FIELDS}
        res["type"] = self.type()
        res["follow_symlink"] = self._follow_symlink
        return res

    def _md5_command(self) -> str:
        return f"md5sum {self._path}"

    def _sha256_command(self) -> str:
        return f"sha256sum {self._path}"

    def _checksum(self, command: str, width: int) -> Optional[str]:
        try:
            result = self._backend.run_command(command)
        except TypeError as e:
            logger.debug(f"Checksum command failed for {self._path}: {e}")
            return None

        stdout = getattr(result, "stdout", None)
        if not isinstance(stdout, str):
            return None

        return stdout[:width] or None

    def md5sum(self) -> Optional[str]:
        """Return the MD5 hex digest of the file, or None if it is unavailable."""
        return self._checksum(self._md5_command(), 32)

    def sha256sum(self) -> Optional[str]:
        """Return the SHA-256 hex digest of the file, or None if it is unavailable."""
        return self._checksum(self._sha256_command(), 64)

    def source(self) -> "File":
        """
        Get the entity describing the raw path without following symlinks.

        Returns:
            A new File of the same class when this one follows symlinks,
            otherwise this File itself
        """
        if self._follow_symlink:
            return self.__class__(self._backend, self._path, False)
        return self

    def source_path(self) -> str:
        return self._path

    # Only Windows hosts report version metadata; every other OS returns None.
    def product_version(self) -> Optional[str]:
        return None

    def file_version(self) -> Optional[str]:
        return None

    def is_version(self, version: Optional[str]) -> bool:
        return self.product_version() == version or self.file_version() == version

    def is_block_device(self) -> bool:
        return self.type() == "block_device"

    def is_character_device(self) -> bool:
        return self.type() == "character_device"

    def is_pipe(self) -> bool:
        return self.type() == "pipe"

    def is_file(self) -> bool:
        return self.type() == "file"

    def is_socket(self) -> bool:
        return self.type() == "socket"

    def is_directory(self) -> bool:
        return self.type() == "directory"

    def is_symlink(self) -> bool:
        return self.source().type() == "symlink"

    def is_owned_by(self, owner: Optional[str]) -> bool:
        return self.owner() == owner

    def is_grouped_into(self, group: Optional[str]) -> bool:
        return self.group() == group

    def is_mode(self, mode: Optional[int]) -> bool:
        return self.mode() == mode

    def is_linked_to(self, destination: Optional[str]) -> bool:
        return self.link_path() == destination

    def unix_mode_mask(self, owner: str, kind: str) -> Optional[int]:
        """
        Get the permission bits for an owner class and access kind.

        Args:
            owner: One of "all", "owner", "group", "other"
            kind: One of "r", "w", "x"

        Returns:
            The mask, e.g. 0o400 for ("owner", "r"), or None for unknown names
        """
        owner_mask = UNIX_MODE_OWNERS.get(owner)
        type_mask = UNIX_MODE_TYPES.get(kind)
        if owner_mask is None or type_mask is None:
            return None
        return owner_mask & type_mask

    def path(self) -> Optional[str]:
        """
        Get the path this File describes.

        Returns:
            The link target when following a symlink, otherwise the raw path
        """
        if self._follow_symlink and self.is_symlink():
            return self.link_path()
        return self._path

    def mounted(self) -> Optional[CommandResult]:
        """Run the mount lookup; only meaningful when supports_mount is set."""
        return None

    def is_mounted(self) -> bool:
        """
        Check whether the path is a mount point.

        Returns:
            False when the OS has no mount lookup, otherwise True if the
            lookup printed anything
        """
        if not self.supports_mount:
            return False

        result = self.mounted()
        return result is not None and result.stdout is not None and result.stdout != ""

    def __repr__(self) -> str:
        """Detailed string representation of the File."""
        return (
            f"{self.__class__.__name__}(path='{self._path}', "
            f"follow_symlink={self._follow_symlink})"
        )
