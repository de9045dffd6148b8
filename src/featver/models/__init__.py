"""Models for featver data structures."""

from .descriptor import (
    PackageDescriptor,
    DescriptorError,
    DescriptorNotFoundError,
    VersionFieldNotFoundError,
    DuplicateVersionFieldError,
    DescriptorWriteError,
    DESCRIPTOR_FILENAME,
)

__all__ = [
    "PackageDescriptor",
    "DescriptorError",
    "DescriptorNotFoundError",
    "VersionFieldNotFoundError",
    "DuplicateVersionFieldError",
    "DescriptorWriteError",
    "DESCRIPTOR_FILENAME",
]
