"""
Tests for the File entity.
"""

from typing import Optional
from unittest.mock import MagicMock

import pytest

from fileprobe.entities.CommandResult import CommandResult
from fileprobe.entities.File import File
from fileprobe.ports.backend.command_runner_port import CommandRunnerPort

EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"
EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


class StubFile(File):
    """File whose type and link target come from the runner, everything else is fixed."""

    def exists(self) -> bool:
        return True

    def mode(self) -> Optional[int]:
        return 0o644

    def owner(self) -> Optional[str]:
        return "root"

    def group(self) -> Optional[str]:
        return "wheel"

    def uid(self) -> Optional[int]:
        return 0

    def gid(self) -> Optional[int]:
        return 0

    def content(self) -> Optional[str]:
        return "hello"

    def mtime(self) -> Optional[int]:
        return 1700000000

    def size(self) -> Optional[int]:
        return 5

    def selinux_label(self) -> Optional[str]:
        return None

    def type(self) -> str:
        flag = " -L" if self._follow_symlink else ""
        output = self._backend.run_command(f"type{flag} {self._path}").stdout.strip()
        return output or "unknown"

    def link_path(self) -> Optional[str]:
        return self._backend.run_command(f"readlink -f {self._path}").stdout.strip()


class VersionedFile(StubFile):
    def product_version(self) -> Optional[str]:
        return "10.0.19041"

    def file_version(self) -> Optional[str]:
        return "10.0.19041.1"


class MountableFile(StubFile):
    supports_mount = True

    def mounted(self) -> Optional[CommandResult]:
        return self._backend.run_command(f"mount | grep -- ' on {self._path} '")


class UnmountableFile(StubFile):
    """Has a mount lookup but does not advertise the capability."""

    def mounted(self) -> Optional[CommandResult]:
        return CommandResult(stdout="/dev/sda1 on /data type ext4\n")


@pytest.fixture
def link_runner(fake_runner):
    """Runner describing /tmp/link -> /tmp/target, a regular file."""
    fake_runner.respond("type /tmp/link", stdout="symlink\n")
    fake_runner.respond("type -L /tmp/link", stdout="file\n")
    fake_runner.respond("readlink -f /tmp/link", stdout="/tmp/target\n")
    fake_runner.respond("type /tmp/plain", stdout="file\n")
    fake_runner.respond("type -L /tmp/plain", stdout="file\n")
    return fake_runner


class TestFileContract:
    """Test cases for the abstract File contract."""

    @pytest.mark.parametrize(
        "method",
        [
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
            "type",
            "link_path",
        ],
    )
    def test_primitive_not_implemented(self, fake_runner, method):
        """Test every primitive of the bare contract names itself when missing."""
        file = File(fake_runner, "/etc/hosts")

        with pytest.raises(
            NotImplementedError, match=f"File must implement the {method}\\(\\) method."
        ):
            getattr(file, method)()

    def test_construction_does_not_run_commands(self, fake_runner):
        """Test creating a File does not touch the backend."""
        File(fake_runner, "/etc/hosts")
        StubFile(fake_runner, "/etc/hosts", follow_symlink=False)

        assert fake_runner.commands == []

    def test_incomplete_subclass_fails_on_first_access(self, fake_runner):
        """Test a subclass missing a primitive fails only when it is used."""

        class NoOwnerFile(StubFile):
            owner = File.owner

        file = NoOwnerFile(fake_runner, "/etc/hosts")
        assert file.mode() == 0o644

        with pytest.raises(NotImplementedError, match="owner\\(\\)"):
            file.is_owned_by("root")

    def test_serialize_on_bare_contract_raises(self, fake_runner):
        """Test serialize propagates NotImplementedError from the contract."""
        with pytest.raises(NotImplementedError, match="exists"):
            File(fake_runner, "/etc/hosts").serialize()

    def test_none_path_becomes_empty(self, fake_runner):
        """Test a None path is stored as an empty string."""
        file = StubFile(fake_runner, None)

        assert file.source_path() == ""

    def test_follow_symlink_is_read_only(self, fake_runner):
        """Test follow_symlink cannot be reassigned."""
        file = StubFile(fake_runner, "/etc/hosts")

        with pytest.raises(AttributeError):
            file.follow_symlink = False  # type: ignore[misc]

    def test_repr_representation(self, fake_runner):
        """Test detailed string representation of File."""
        file = StubFile(fake_runner, "/etc/hosts", follow_symlink=False)

        assert repr(file) == "StubFile(path='/etc/hosts', follow_symlink=False)"


class TestSerialize:
    """Test cases for File.serialize."""

    def test_serialize_keys_and_values(self, link_runner):
        """Test serialize returns exactly the data fields plus type and follow_symlink."""
        file = StubFile(link_runner, "/tmp/plain")

        res = file.serialize()

        assert list(res.keys()) == [
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
            "type",
            "follow_symlink",
        ]
        assert res["exists"] is True
        assert res["mode"] == 0o644
        assert res["owner"] == "root"
        assert res["path"] == "/tmp/plain"
        assert res["type"] == "file"
        assert res["follow_symlink"] is True

    def test_serialize_keeps_key_for_missing_selinux_label(self, link_runner):
        """Test a None selinux label still appears in the result."""
        res = StubFile(link_runner, "/tmp/plain").serialize()

        assert "selinux_label" in res
        assert res["selinux_label"] is None

    def test_serialize_symlink_reports_target_path(self, link_runner):
        """Test serialize uses the link target as path when following."""
        res = StubFile(link_runner, "/tmp/link").serialize()

        assert res["path"] == "/tmp/target"
        assert res["type"] == "file"

    def test_serialize_propagates_backend_errors(self, fake_runner):
        """Test a failing primitive aborts serialize."""

        class BrokenFile(StubFile):
            def size(self) -> Optional[int]:
                raise RuntimeError("connection lost")

        with pytest.raises(RuntimeError, match="connection lost"):
            BrokenFile(fake_runner, "/tmp/plain").serialize()


class TestSymlinkResolution:
    """Test cases for source, path and is_symlink."""

    def test_source_of_following_file_is_new_unresolved_view(self, fake_runner):
        """Test source builds a non-following File of the same class."""
        file = StubFile(fake_runner, "/tmp/link")

        source = file.source()

        assert source is not file
        assert isinstance(source, StubFile)
        assert source.follow_symlink is False
        assert source.source_path() == "/tmp/link"
        assert source.backend is fake_runner

    def test_source_of_unresolved_view_is_itself(self, fake_runner):
        """Test source of a non-following File returns the same object."""
        file = StubFile(fake_runner, "/tmp/link", follow_symlink=False)

        assert file.source() is file

    def test_source_is_idempotent(self, fake_runner):
        """Test source applied twice gives the same unresolved view."""
        first = StubFile(fake_runner, "/tmp/link").source()
        second = first.source()

        assert second is first
        assert (second.source_path(), second.follow_symlink) == ("/tmp/link", False)

    def test_is_symlink_independent_of_follow(self, link_runner):
        """Test both views agree on whether the raw path is a link."""
        followed = StubFile(link_runner, "/tmp/link")
        unresolved = StubFile(link_runner, "/tmp/link", follow_symlink=False)

        assert followed.is_symlink() is True
        assert unresolved.is_symlink() is True
        assert StubFile(link_runner, "/tmp/plain").is_symlink() is False
        assert StubFile(link_runner, "/tmp/plain", False).is_symlink() is False

    def test_symlink_to_regular_file(self, link_runner):
        """Test the two views of a link to a regular file."""
        followed = StubFile(link_runner, "/tmp/link")
        unresolved = StubFile(link_runner, "/tmp/link", follow_symlink=False)

        assert unresolved.type() == "symlink"
        assert followed.type() == "file"
        assert followed.is_file() is True
        assert unresolved.is_file() is False
        assert followed.is_directory() is False
        assert unresolved.is_directory() is False

    @pytest.mark.parametrize("follow_symlink", [True, False])
    def test_path_is_raw_path_when_not_a_symlink(self, link_runner, follow_symlink):
        """Test path returns the stored path for regular files."""
        file = StubFile(link_runner, "/tmp/plain", follow_symlink)

        assert file.path() == "/tmp/plain"

    def test_path_of_followed_symlink_is_link_target(self, link_runner):
        """Test path resolves the link only when following."""
        assert StubFile(link_runner, "/tmp/link").path() == "/tmp/target"
        assert StubFile(link_runner, "/tmp/link", False).path() == "/tmp/link"

    def test_source_path_is_raw_path(self, link_runner):
        """Test source_path never resolves the link."""
        assert StubFile(link_runner, "/tmp/link").source_path() == "/tmp/link"

    def test_unresolved_path_does_not_ask_for_link_target(self, link_runner):
        """Test a non-following File never runs readlink."""
        StubFile(link_runner, "/tmp/link", False).path()

        assert not any(cmd.startswith("readlink") for cmd in link_runner.commands)


class TestTypePredicates:
    """Test cases for the type predicates."""

    @pytest.mark.parametrize(
        "file_type,predicate",
        [
            ("block_device", "is_block_device"),
            ("character_device", "is_character_device"),
            ("pipe", "is_pipe"),
            ("file", "is_file"),
            ("socket", "is_socket"),
            ("directory", "is_directory"),
        ],
    )
    def test_predicate_matches_only_its_type(self, fake_runner, file_type, predicate):
        """Test each predicate is true for exactly one type."""
        fake_runner.respond("type -L /dev/thing", stdout=file_type)
        file = StubFile(fake_runner, "/dev/thing")

        predicates = [
            "is_block_device",
            "is_character_device",
            "is_pipe",
            "is_file",
            "is_socket",
            "is_directory",
        ]
        for name in predicates:
            assert getattr(file, name)() is (name == predicate)

    def test_unrecognized_type_matches_nothing(self, fake_runner):
        """Test a type outside the vocabulary matches no predicate."""
        fake_runner.respond("type -L /dev/odd", stdout="door")
        file = StubFile(fake_runner, "/dev/odd")

        assert file.is_file() is False
        assert file.is_directory() is False
        assert file.is_socket() is False


class TestDerivedPredicates:
    """Test cases for ownership, mode and version predicates."""

    def test_is_owned_by(self, fake_runner):
        """Test is_owned_by compares the owner name."""
        file = StubFile(fake_runner, "/etc/hosts")

        assert file.is_owned_by("root") is True
        assert file.is_owned_by("nobody") is False

    def test_is_grouped_into_and_is_mode(self, fake_runner):
        """Test group and mode comparisons."""
        file = StubFile(fake_runner, "/etc/hosts")

        assert file.is_grouped_into("wheel") is True
        assert file.is_mode(0o644) is True
        assert file.is_mode(0o600) is False

    def test_is_linked_to(self, link_runner):
        """Test is_linked_to compares the link target."""
        file = StubFile(link_runner, "/tmp/link")

        assert file.is_linked_to("/tmp/target") is True
        assert file.is_linked_to("/tmp/other") is False

    @pytest.mark.parametrize(
        "owner,kind,expected",
        [
            ("owner", "r", 0o400),
            ("group", "w", 0o020),
            ("other", "x", 0o001),
            ("all", "r", 0o444),
            ("nobody", "r", None),
            ("owner", "z", None),
        ],
    )
    def test_unix_mode_mask(self, fake_runner, owner, kind, expected):
        """Test permission masks for owner classes and access kinds."""
        assert StubFile(fake_runner, "/x").unix_mode_mask(owner, kind) == expected

    def test_versions_default_to_none(self, fake_runner):
        """Test non-Windows files report no version metadata."""
        file = StubFile(fake_runner, "/bin/ls")

        assert file.product_version() is None
        assert file.file_version() is None
        assert file.is_version("1.0") is False

    def test_is_version_matches_either_version(self, fake_runner):
        """Test is_version accepts the product or the file version."""
        file = VersionedFile(fake_runner, "C:\\Windows\\notepad.exe")

        assert file.is_version("10.0.19041") is True
        assert file.is_version("10.0.19041.1") is True
        assert file.is_version("9.0") is False


class TestChecksums:
    """Test cases for md5sum and sha256sum."""

    def test_md5sum_of_empty_file(self, fake_runner):
        """Test md5sum keeps only the digest from md5sum output."""
        fake_runner.respond("md5sum /tmp/empty", stdout=f"{EMPTY_MD5}  -\n")

        value = StubFile(fake_runner, "/tmp/empty").md5sum()

        assert value == EMPTY_MD5
        assert len(value) == 32

    def test_sha256sum_of_empty_file(self, fake_runner):
        """Test sha256sum keeps only the 64 digest characters."""
        fake_runner.respond("sha256sum /tmp/empty", stdout=f"{EMPTY_SHA256}  /tmp/empty\n")

        assert StubFile(fake_runner, "/tmp/empty").sha256sum() == EMPTY_SHA256

    def test_checksums_of_missing_file_are_none(self, fake_runner):
        """Test empty command output gives None rather than an empty string."""
        fake_runner.respond("md5sum /nope", stdout="", exit_status=1)
        fake_runner.respond("sha256sum /nope", stdout="", exit_status=1)
        file = StubFile(fake_runner, "/nope")

        assert file.md5sum() is None
        assert file.sha256sum() is None

    def test_checksum_with_absent_result_is_none(self):
        """Test a runner returning no result gives None."""
        runner = MagicMock(spec=CommandRunnerPort)
        runner.run_command.return_value = None

        assert StubFile(runner, "/tmp/x").md5sum() is None

    def test_checksum_with_absent_stdout_is_none(self):
        """Test a result without stdout gives None."""
        runner = MagicMock(spec=CommandRunnerPort)
        runner.run_command.return_value = CommandResult(stdout=None)  # type: ignore[arg-type]

        assert StubFile(runner, "/tmp/x").sha256sum() is None

    def test_checksum_swallows_type_error(self):
        """Test a TypeError from the runner is not propagated."""
        runner = MagicMock(spec=CommandRunnerPort)
        runner.run_command.side_effect = TypeError("expected str, got NoneType")

        assert StubFile(runner, "/tmp/x").md5sum() is None

    def test_checksum_propagates_other_errors(self):
        """Test runner failures other than TypeError still raise."""
        runner = MagicMock(spec=CommandRunnerPort)
        runner.run_command.side_effect = RuntimeError("connection lost")

        with pytest.raises(RuntimeError):
            StubFile(runner, "/tmp/x").md5sum()


class TestMountDetection:
    """Test cases for is_mounted."""

    def test_not_mounted_without_capability(self, fake_runner):
        """Test files without a mount lookup are never mounted."""
        assert StubFile(fake_runner, "/data").is_mounted() is False
        assert fake_runner.commands == []

    def test_capability_flag_wins_over_lookup(self, fake_runner):
        """Test a mount lookup is ignored unless supports_mount is set."""
        assert UnmountableFile(fake_runner, "/data").is_mounted() is False

    def test_mounted_when_lookup_prints(self, fake_runner):
        """Test a non-empty mount lookup means mounted."""
        fake_runner.respond(
            "mount | grep -- ' on /data '", stdout="/dev/sdb1 on /data type xfs (rw)\n"
        )

        assert MountableFile(fake_runner, "/data").is_mounted() is True

    def test_not_mounted_when_lookup_is_empty(self, fake_runner):
        """Test an empty mount lookup means not mounted."""
        assert MountableFile(fake_runner, "/data").is_mounted() is False

    def test_not_mounted_when_lookup_returns_none(self, fake_runner):
        """Test a mount lookup returning None means not mounted."""

        class NoResultFile(MountableFile):
            def mounted(self) -> Optional[CommandResult]:
                return None

        assert NoResultFile(fake_runner, "/data").is_mounted() is False
