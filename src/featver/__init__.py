"""featver: feature version numbers for package DESCRIPTION files."""

from .version import get_version
from .core.operations import (
    add_feature_version,
    remove_feature_version,
    get_package_version,
    split_feature_version,
    has_feature_suffix,
    feature_timestamp,
)
from .models.descriptor import (
    PackageDescriptor,
    DescriptorError,
    DescriptorNotFoundError,
    VersionFieldNotFoundError,
    DuplicateVersionFieldError,
    DescriptorWriteError,
)

__version__ = get_version()

__all__ = [
    "add_feature_version",
    "remove_feature_version",
    "get_package_version",
    "split_feature_version",
    "has_feature_suffix",
    "feature_timestamp",
    "PackageDescriptor",
    "DescriptorError",
    "DescriptorNotFoundError",
    "VersionFieldNotFoundError",
    "DuplicateVersionFieldError",
    "DescriptorWriteError",
]
