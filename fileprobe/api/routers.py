"""
FastAPI router definitions for the API endpoints.
"""

from fastapi import APIRouter, HTTPException, Query

from fileprobe.api.dependencies import get_compute_checksum_uc, get_inspect_file_uc
from fileprobe.api.schemas import (
    ChecksumResponse,
    ErrorResponse,
    FileInspectionResponse,
)

router = APIRouter()


@router.get(
    "/files/inspect",
    response_model=FileInspectionResponse,
    responses={400: {"model": ErrorResponse}},
)
def inspect_file(
    path: str = Query(..., description="Path of the file on the target"),
    follow_symlink: bool = Query(True, description="Describe the link target"),
    checksums: bool = Query(False, description="Include md5 and sha256 digests"),
):
    """
    Inspect a file on the target.

    Args:
        path: Path of the file on the target
        follow_symlink: Describe the link target instead of the link itself
        checksums: Whether to compute md5 and sha256 digests

    Returns:
        FileInspectionResponse: Attributes of the file

    Raises:
        HTTPException: If the inspection fails
    """
    try:
        details = get_inspect_file_uc().execute(
            path, follow_symlink=follow_symlink, include_checksums=checksums
        )
        return FileInspectionResponse(**details)
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get(
    "/files/checksum",
    response_model=ChecksumResponse,
    responses={400: {"model": ErrorResponse}},
)
def file_checksum(
    path: str = Query(..., description="Path of the file on the target"),
    algorithm: str = Query("sha256", description="md5 or sha256"),
):
    """
    Compute the checksum of a file on the target.

    Raises:
        HTTPException: If the algorithm is unknown or the command fails
    """
    try:
        checksum = get_compute_checksum_uc().execute(path, algorithm)
        return ChecksumResponse(path=path, algorithm=algorithm, checksum=checksum)
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))
