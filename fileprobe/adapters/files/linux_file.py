"""
File implementation for Linux hosts.
"""

from typing import Optional

from typing_extensions import override

from fileprobe.adapters.files.unix_file import UnixFile


class LinuxFile(UnixFile):
    """Linux file."""

    @override
    def content(self) -> Optional[str]:
        content = self._backend.run_command(f"cat {self._spath} || echo -n").stdout
        if content:
            return content

        # empty output is only real content for an existing, empty file
        if self.is_directory():
            return None
        size = self.size()
        if size is None or size > 0:
            return None
        return content
