"""
Parsers for the output of the GNU and BSD stat commands.
"""

from typing import Any

from fileprobe.ports.backend.command_runner_port import CommandRunnerPort

# checked in order: socket and symlink share bits with file
TYPES = (
    ("socket", 0o140000),
    ("symlink", 0o120000),
    ("file", 0o100000),
    ("block_device", 0o060000),
    ("directory", 0o040000),
    ("character_device", 0o020000),
    ("pipe", 0o010000),
)

GNU_STAT_FORMAT = r"%s\n%f\n%U\n%u\n%G\n%g\n%X\n%Y\n%C"
BSD_STAT_FORMAT = r"%z\n%p\n%Su\n%u\n%Sg\n%g\n%a\n%m"

# values stat prints when no security context is available
NO_SELINUX_LABEL = ("?", "(null)", "C")


def find_type(mode: int) -> str:
    """Map the file type bits of a raw st_mode to a file type name."""
    for name, mask in TYPES:
        if mode & mask == mask:
            return name
    return "unknown"


def parse_gnu_stat(output: str) -> dict[str, Any]:
    """
    Parse the output of ``stat --printf`` with GNU_STAT_FORMAT.

    Args:
        output: Raw stdout of the stat command

    Returns:
        Stat dictionary, empty when the output does not have nine lines
    """
    fields = output.split("\n")
    if len(fields) != 9:
        return {}

    try:
        tmask = int(fields[1], 16)
        selinux = fields[8]
        if selinux in NO_SELINUX_LABEL:
            selinux = None

        return {
            "type": find_type(tmask),
            "mode": tmask & 0o7777,
            "owner": fields[2],
            "uid": int(fields[3]),
            "group": fields[4],
            "gid": int(fields[5]),
            "mtime": int(fields[7]),
            "size": int(fields[0]),
            "selinux_label": selinux,
        }
    except ValueError:
        return {}


def parse_bsd_stat(output: str) -> dict[str, Any]:
    """
    Parse the output of ``stat -f`` with BSD_STAT_FORMAT.

    Args:
        output: Raw stdout of the stat command

    Returns:
        Stat dictionary, empty when the output does not have eight lines
    """
    fields = output.rstrip("\n").split("\n")
    if len(fields) != 8:
        return {}

    try:
        tmask = int(fields[1], 8)
        return {
            "type": find_type(tmask),
            "mode": tmask & 0o7777,
            "owner": fields[2],
            "uid": int(fields[3]),
            "group": fields[4],
            "gid": int(fields[5]),
            "mtime": int(fields[7]),
            "size": int(fields[0]),
            "selinux_label": None,
        }
    except ValueError:
        return {}


def gnu_stat(
    escaped_path: str, backend: CommandRunnerPort, follow_symlink: bool
) -> dict[str, Any]:
    lstat = " -L" if follow_symlink else ""
    res = backend.run_command(
        f"stat{lstat} {escaped_path} 2>/dev/null --printf '{GNU_STAT_FORMAT}'"
    )
    # the exit status is not checked: stat fails on %C when selinux is not supported
    return parse_gnu_stat(res.stdout)


def bsd_stat(
    escaped_path: str, backend: CommandRunnerPort, follow_symlink: bool
) -> dict[str, Any]:
    lstat = " -L" if follow_symlink else ""
    res = backend.run_command(f"stat{lstat} -f '{BSD_STAT_FORMAT}' {escaped_path}")
    if res.exit_status != 0:
        return {}
    return parse_bsd_stat(res.stdout)
