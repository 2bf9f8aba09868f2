"""
Use case for inspecting a single file on the target.
"""

import logging
from typing import Any, Optional

from fileprobe.adapters.files.factory import FileFactory
from fileprobe.exceptions import FileInspectionError


class InspectFileUseCase:
    """Use case for collecting every attribute of a file."""

    def __init__(
        self,
        file_factory: FileFactory,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_factory: Factory building File entities for the target
            logger: Logger instance to use for logging
        """
        self._file_factory = file_factory
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self,
        path: str,
        follow_symlink: bool = True,
        include_checksums: bool = False,
    ) -> dict[str, Any]:
        """
        Inspect a file.

        Args:
            path: Path of the file on the target
            follow_symlink: Describe the link target instead of the link itself
            include_checksums: Also compute md5 and sha256 digests

        Returns:
            The serialized file plus symlink, mount and version details

        Raises:
            FileInspectionError: If any attribute lookup fails
        """
        try:
            self._logger.info(f"Inspecting file: {path}")
            file = self._file_factory.create(path, follow_symlink)

            details = file.serialize()
            details["symlink"] = file.is_symlink()
            details["mounted"] = file.is_mounted()
            details["product_version"] = file.product_version()
            details["file_version"] = file.file_version()
            if include_checksums:
                details["md5sum"] = file.md5sum()
                details["sha256sum"] = file.sha256sum()

            self._logger.info(f"Inspected {path}: type={details['type']}")
            return details
        except FileInspectionError:
            raise
        except Exception as e:
            self._logger.error(f"Error inspecting file: {e}")
            raise FileInspectionError(f"Failed to inspect {path}: {str(e)}")
