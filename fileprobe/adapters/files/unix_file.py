"""
File implementation for Unix-like hosts with GNU coreutils.
"""

import shlex
from typing import Any, Optional

from typing_extensions import override

from fileprobe.adapters.files.remote_file import RemoteFile
from fileprobe.adapters.files.stat_parser import gnu_stat
from fileprobe.entities.CommandResult import CommandResult


def mount_lookup_command(path: str) -> str:
    """Build the mount table lookup for a path, quoted for the shell."""
    pattern = shlex.quote(f" on {path} ")
    return f"mount | grep -F -- {pattern}"


class UnixFile(RemoteFile):
    """Unix file: attributes come from test, stat, cat and readlink."""

    supports_mount = True

    @override
    def _sanitize_filename(self, path: str) -> None:
        self._spath = shlex.quote(path)

    def stat(self) -> dict[str, Any]:
        """Run stat for this path; an empty dict means stat gave nothing usable."""
        return gnu_stat(self._spath, self._backend, self._follow_symlink)

    @override
    def exists(self) -> bool:
        check = f"test -e {self._spath}"
        if not self._follow_symlink:
            check += f" || test -L {self._spath}"
        return self._backend.run_command(check).exit_status == 0

    @override
    def content(self) -> Optional[str]:
        if not self.exists() or self.is_directory():
            return None

        content = self._backend.run_command(f"cat {self._spath} || echo -n").stdout
        size = self.size()
        if size is None or (size > 0 and not content):
            return None
        return content

    @override
    def type(self) -> str:
        return self.stat().get("type", "unknown")

    @override
    def mode(self) -> Optional[int]:
        return self.stat().get("mode")

    @override
    def owner(self) -> Optional[str]:
        return self.stat().get("owner")

    @override
    def group(self) -> Optional[str]:
        return self.stat().get("group")

    @override
    def uid(self) -> Optional[int]:
        return self.stat().get("uid")

    @override
    def gid(self) -> Optional[int]:
        return self.stat().get("gid")

    @override
    def mtime(self) -> Optional[int]:
        return self.stat().get("mtime")

    @override
    def size(self) -> Optional[int]:
        return self.stat().get("size")

    @override
    def selinux_label(self) -> Optional[str]:
        return self.stat().get("selinux_label")

    @override
    def link_path(self) -> Optional[str]:
        # path() already checked is_symlink(); direct callers have not
        if not self.is_symlink():
            return None
        return self._backend.run_command(f"readlink -f {self._spath}").stdout.strip()

    def shallow_link_path(self) -> Optional[str]:
        """Get the link target one level deep, as stored in the link."""
        if not self.is_symlink():
            return None
        return self._backend.run_command(f"readlink {self._spath}").stdout.strip()

    @override
    def mounted(self) -> Optional[CommandResult]:
        return self._backend.run_command(mount_lookup_command(self._path))

    @override
    def _md5_command(self) -> str:
        return f"md5sum {self._spath}"

    @override
    def _sha256_command(self) -> str:
        return f"sha256sum {self._spath}"
