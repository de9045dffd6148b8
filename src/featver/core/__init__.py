"""Core operations for featver."""

from .operations import (
    add_feature_version,
    remove_feature_version,
    get_package_version,
    split_feature_version,
    has_feature_suffix,
    feature_timestamp,
)

__all__ = [
    "add_feature_version",
    "remove_feature_version",
    "get_package_version",
    "split_feature_version",
    "has_feature_suffix",
    "feature_timestamp",
]
