"""
Use case for computing the checksum of a file on the target.
"""

import logging
from typing import Optional

from fileprobe.adapters.files.factory import FileFactory
from fileprobe.exceptions import FileInspectionError

ALGORITHMS = ("md5", "sha256")


class ComputeChecksumUseCase:
    """Use case for computing a file digest."""

    def __init__(
        self,
        file_factory: FileFactory,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_factory = file_factory
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, algorithm: str = "sha256") -> Optional[str]:
        """
        Compute a file digest.

        Args:
            path: Path of the file on the target
            algorithm: "md5" or "sha256"

        Returns:
            Hex digest, or None if the target could not produce one

        Raises:
            FileInspectionError: If the algorithm is unknown or the lookup fails
        """
        if algorithm not in ALGORITHMS:
            raise FileInspectionError(
                f"Unsupported checksum algorithm: {algorithm} (expected one of {', '.join(ALGORITHMS)})"
            )

        try:
            self._logger.info(f"Computing {algorithm} checksum of {path}")
            file = self._file_factory.create(path)
            if algorithm == "md5":
                return file.md5sum()
            return file.sha256sum()
        except Exception as e:
            self._logger.error(f"Error computing checksum: {e}")
            raise FileInspectionError(
                f"Failed to compute {algorithm} checksum of {path}: {str(e)}"
            )
