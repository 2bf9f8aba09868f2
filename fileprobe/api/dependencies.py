"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from fileprobe.container import container
from fileprobe.use_cases.files.compute_checksum import ComputeChecksumUseCase
from fileprobe.use_cases.files.inspect_file import InspectFileUseCase


def get_inspect_file_uc() -> InspectFileUseCase:
    """
    Get the inspect file use case from the container.

    Returns:
        InspectFileUseCase: The inspect file use case instance
    """
    return container.get_inspect_file_use_case()


def get_compute_checksum_uc() -> ComputeChecksumUseCase:
    """
    Get the compute checksum use case from the container.

    Returns:
        ComputeChecksumUseCase: The compute checksum use case instance
    """
    return container.get_compute_checksum_use_case()
