"""
File implementation for Windows hosts, queried through PowerShell.
"""

import re
from typing import Optional

from typing_extensions import override

from fileprobe.adapters.files.remote_file import RemoteFile

# characters that cannot appear in a Windows path; separators and ':' are kept
_INVALID_PATH_CHARS = re.compile(r'[<>"|?*]')


class WindowsFile(RemoteFile):
    """Windows file."""

    path_separator = "\\"

    @override
    def _sanitize_filename(self, path: str) -> None:
        self._spath = _INVALID_PATH_CHARS.sub("", path)

    def _output(self, command: str) -> str:
        return self._backend.run_command(command).stdout.strip()

    def attributes(self) -> list[str]:
        """Get the FileAttributes flags of the item, e.g. ["Archive", "ReadOnly"]."""
        output = self._output(
            f'(Get-ItemProperty -Path "{self._spath}").attributes.ToString()'
        )
        return [attr for attr in re.split(r"\s*,\s*", output) if attr]

    @override
    def exists(self) -> bool:
        return self._output(f'(Test-Path -Path "{self._spath}").ToString()') == "True"

    @override
    def content(self) -> Optional[str]:
        content = self._backend.run_command(
            f'Get-Content("{self._spath}") | Out-String'
        ).stdout
        if not content and self.is_directory():
            return None
        return content

    @override
    def type(self) -> str:
        attributes = self.attributes()
        if "Archive" in attributes and "Directory" not in attributes:
            return "file"
        if "ReparsePoint" in attributes:
            return "symlink"
        if "Directory" in attributes:
            return "directory"
        return "unknown"

    @override
    def owner(self) -> Optional[str]:
        return self._output(f'Get-Acl "{self._spath}" | select -expand Owner') or None

    @override
    def size(self) -> Optional[int]:
        if not self.is_file():
            return None
        output = self._output(f"((Get-Item '{self._spath}').Length)")
        try:
            return int(output)
        except ValueError:
            return None

    @override
    def link_path(self) -> Optional[str]:
        if not self.is_symlink():
            return None
        return self._output(f'(Get-Item -Path "{self._spath}").Target') or None

    # Windows has no POSIX mode bits, numeric ids or SELinux labels
    @override
    def mode(self) -> Optional[int]:
        return None

    @override
    def group(self) -> Optional[str]:
        return None

    @override
    def uid(self) -> Optional[int]:
        return None

    @override
    def gid(self) -> Optional[int]:
        return None

    @override
    def mtime(self) -> Optional[int]:
        return None

    @override
    def selinux_label(self) -> Optional[str]:
        return None

    @override
    def product_version(self) -> Optional[str]:
        return self._output(
            f'[System.Diagnostics.FileVersionInfo]::GetVersionInfo("{self._spath}").ProductVersion'
        ) or None

    @override
    def file_version(self) -> Optional[str]:
        return self._output(
            f'[System.Diagnostics.FileVersionInfo]::GetVersionInfo("{self._spath}").FileVersion'
        ) or None

    @override
    def _md5_command(self) -> str:
        return f'(Get-FileHash -Path "{self._spath}" -Algorithm MD5).Hash.ToLower()'

    @override
    def _sha256_command(self) -> str:
        return f'(Get-FileHash -Path "{self._spath}" -Algorithm SHA256).Hash.ToLower()'
