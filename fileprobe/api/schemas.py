"""
Pydantic models for API requests and responses.
"""

from typing import Optional

from pydantic import BaseModel, Field


class FileInspectionResponse(BaseModel):
    """Schema for the attributes of an inspected file."""

    path: Optional[str] = Field(None, description="Described path (link target when following)")
    exists: bool = Field(..., description="Whether the path exists")
    type: str = Field(..., description="file, directory, symlink, socket, pipe, block_device, character_device or unknown")
    mode: Optional[int] = Field(None, description="Permission bits")
    owner: Optional[str] = Field(None, description="Owner name")
    group: Optional[str] = Field(None, description="Group name")
    uid: Optional[int] = Field(None, description="Numeric owner id")
    gid: Optional[int] = Field(None, description="Numeric group id")
    content: Optional[str] = Field(None, description="File content")
    mtime: Optional[int] = Field(None, description="Modification time (epoch seconds)")
    size: Optional[int] = Field(None, description="Size in bytes")
    selinux_label: Optional[str] = Field(None, description="SELinux security context")
    follow_symlink: bool = Field(..., description="Whether symlinks were followed")
    symlink: bool = Field(False, description="Whether the raw path is a symlink")
    mounted: bool = Field(False, description="Whether the path is a mount point")
    product_version: Optional[str] = Field(None, description="Windows product version")
    file_version: Optional[str] = Field(None, description="Windows file version")
    md5sum: Optional[str] = Field(None, description="MD5 digest, when requested")
    sha256sum: Optional[str] = Field(None, description="SHA-256 digest, when requested")


class ChecksumResponse(BaseModel):
    """Schema for checksum response."""

    path: str = Field(..., description="Path of the file")
    algorithm: str = Field(..., description="md5 or sha256")
    checksum: Optional[str] = Field(None, description="Hex digest, null when unavailable")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
