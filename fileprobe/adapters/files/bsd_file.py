"""
File implementation for BSD hosts, including macOS.
"""

from typing import Any

from typing_extensions import override

from fileprobe.adapters.files.stat_parser import bsd_stat
from fileprobe.adapters.files.unix_file import UnixFile


class BsdFile(UnixFile):
    """BSD file: same commands as UnixFile, but BSD stat syntax."""

    @override
    def stat(self) -> dict[str, Any]:
        return bsd_stat(self._spath, self._backend, self._follow_symlink)
