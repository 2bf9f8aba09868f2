"""
File implementation for QNX hosts.

QNX ships without stat, so only existence, content and a coarse type are
available.
"""

from typing import Optional

from typing_extensions import override

from fileprobe.adapters.files.unix_file import UnixFile


class QnxFile(UnixFile):
    """QNX file."""

    supports_mount = False

    def _unsupported(self, name: str):
        raise NotImplementedError(f"QNX does not implement the {name}() method yet.")

    @override
    def content(self) -> Optional[str]:
        if not self.exists():
            return None
        return self._backend.run_command(f"cat {self._spath}").stdout or ""

    @override
    def type(self) -> str:
        if "directory" in self._backend.run_command(f"file {self._spath}").stdout:
            return "directory"
        return "file"

    @override
    def mode(self) -> Optional[int]:
        return self._unsupported("mode")

    @override
    def owner(self) -> Optional[str]:
        return self._unsupported("owner")

    @override
    def group(self) -> Optional[str]:
        return self._unsupported("group")

    @override
    def uid(self) -> Optional[int]:
        return self._unsupported("uid")

    @override
    def gid(self) -> Optional[int]:
        return self._unsupported("gid")

    @override
    def mtime(self) -> Optional[int]:
        return self._unsupported("mtime")

    @override
    def size(self) -> Optional[int]:
        return self._unsupported("size")

    @override
    def selinux_label(self) -> Optional[str]:
        return self._unsupported("selinux_label")

    @override
    def link_path(self) -> Optional[str]:
        return self._unsupported("link_path")
