"""
File implementation for the machine the process runs on.
"""

import hashlib
import os
import shlex
import stat
from typing import Optional

from typing_extensions import override

from fileprobe.adapters.files.unix_file import mount_lookup_command
from fileprobe.entities.CommandResult import CommandResult
from fileprobe.entities.File import File

if os.name != "nt":
    import grp
    import pwd


class LocalFile(File):
    """
    Local file read with os.stat.

    Only the SELinux label and the mount lookup go through the command
    runner, since the os module cannot report them.
    """

    supports_mount = os.name != "nt"

    def _stat(self) -> Optional[os.stat_result]:
        try:
            if self._follow_symlink:
                return os.stat(self._path)
            return os.lstat(self._path)
        except (OSError, ValueError):
            return None

    @override
    def exists(self) -> bool:
        if self._follow_symlink:
            return os.path.exists(self._path)
        return os.path.lexists(self._path)

    @override
    def type(self) -> str:
        st = self._stat()
        if st is None:
            return "unknown"

        mode = st.st_mode
        if stat.S_ISLNK(mode):
            return "symlink"
        if stat.S_ISREG(mode):
            return "file"
        if stat.S_ISDIR(mode):
            return "directory"
        if stat.S_ISSOCK(mode):
            return "socket"
        if stat.S_ISFIFO(mode):
            return "pipe"
        if stat.S_ISBLK(mode):
            return "block_device"
        if stat.S_ISCHR(mode):
            return "character_device"
        return "unknown"

    @override
    def content(self) -> Optional[str]:
        # pipes and devices would block or never end
        if not os.path.isfile(self._path):
            return None
        try:
            with open(self._path, encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError, ValueError):
            return None

    @override
    def mode(self) -> Optional[int]:
        st = self._stat()
        return None if st is None else st.st_mode & 0o7777

    @override
    def owner(self) -> Optional[str]:
        st = self._stat()
        if st is None or os.name == "nt":
            return None
        try:
            return pwd.getpwuid(st.st_uid).pw_name
        except KeyError:
            return None

    @override
    def group(self) -> Optional[str]:
        st = self._stat()
        if st is None or os.name == "nt":
            return None
        try:
            return grp.getgrgid(st.st_gid).gr_name
        except KeyError:
            return None

    @override
    def uid(self) -> Optional[int]:
        st = self._stat()
        return None if st is None else st.st_uid

    @override
    def gid(self) -> Optional[int]:
        st = self._stat()
        return None if st is None else st.st_gid

    @override
    def mtime(self) -> Optional[int]:
        st = self._stat()
        return None if st is None else int(st.st_mtime)

    @override
    def size(self) -> Optional[int]:
        st = self._stat()
        return None if st is None else st.st_size

    @override
    def selinux_label(self) -> Optional[str]:
        if os.name == "nt":
            return None

        lstat = " -L" if self._follow_symlink else ""
        res = self._backend.run_command(
            f"stat{lstat} {shlex.quote(self._path)} 2>/dev/null --printf '%C'"
        )
        label = res.stdout.strip()
        if res.exit_status != 0 or not label or label == "?":
            return None
        return label

    @override
    def link_path(self) -> Optional[str]:
        # path() already checked is_symlink(); direct callers have not
        if not self.is_symlink():
            return None
        return os.path.realpath(self._path)

    def shallow_link_path(self) -> Optional[str]:
        """Get the link target one level deep, as stored in the link."""
        if not self.is_symlink():
            return None
        return os.readlink(self._path)

    @override
    def mounted(self) -> Optional[CommandResult]:
        return self._backend.run_command(mount_lookup_command(self._path))

    def _digest(self, algorithm: str) -> Optional[str]:
        if not os.path.isfile(self._path):
            return None

        digest = hashlib.new(algorithm)
        try:
            with open(self._path, "rb") as f:
                for chunk in iter(lambda: f.read(65536), b""):
                    digest.update(chunk)
        except (OSError, ValueError):
            return None
        return digest.hexdigest()

    @override
    def md5sum(self) -> Optional[str]:
        return self._digest("md5")

    @override
    def sha256sum(self) -> Optional[str]:
        return self._digest("sha256")
