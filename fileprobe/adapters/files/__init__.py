"""
OS specific File implementations.
"""

from fileprobe.adapters.files.bsd_file import BsdFile
from fileprobe.adapters.files.factory import FileFactory
from fileprobe.adapters.files.linux_file import LinuxFile
from fileprobe.adapters.files.local_file import LocalFile
from fileprobe.adapters.files.qnx_file import QnxFile
from fileprobe.adapters.files.remote_file import RemoteFile
from fileprobe.adapters.files.unix_file import UnixFile
from fileprobe.adapters.files.windows_file import WindowsFile

__all__ = [
    "BsdFile",
    "FileFactory",
    "LinuxFile",
    "LocalFile",
    "QnxFile",
    "RemoteFile",
    "UnixFile",
    "WindowsFile",
]
