"""
Shared base for File implementations that query a remote host.
"""

from typing import Optional

from fileprobe.entities.File import File


class RemoteFile(File):
    """Base class for files inspected through shell commands on another host."""

    path_separator = "/"

    def basename(self, suffix: Optional[str] = None, sep: Optional[str] = None) -> str:
        """
        Get the last component of the path.

        Args:
            suffix: Trailing suffix to strip from the name, e.g. ".conf"
            sep: Path separator (defaults to the OS separator)

        Returns:
            The file name, ignoring trailing separators
        """
        sep = sep or self.path_separator
        name = self._detect_filename(self.source_path(), sep)
        if suffix and name != suffix and name.endswith(suffix):
            name = name[: -len(suffix)]
        return name

    def _detect_filename(self, path: str, sep: str) -> str:
        stripped = path.rstrip(sep)
        if not stripped:
            return path
        idx = stripped.rfind(sep)
        if idx == -1:
            return stripped
        return stripped[idx + 1 :]
