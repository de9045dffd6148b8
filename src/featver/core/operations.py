"""Core feature version operations for featver.

A feature version is the build version followed by a dash and the Unix
epoch at the time the feature was started, e.g. ``0.0.0.9000`` on develop
becomes ``0.0.0.9000-1709728345`` on a feature branch. Two features started
within the same second get the same suffix.
"""

import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from ..models.descriptor import PackageDescriptor

FEATURE_SEPARATOR = "-"

Clock = Callable[[], float]


def split_feature_version(version: str) -> Tuple[str, Optional[str]]:
    """Split a version into its build version and feature suffix.

    Args:
        version (str): Version string, e.g. ``0.0.0.9000-1709728345``.

    Returns:
        tuple: ``(base, suffix)``; suffix is None when there is no dash.
    """
    base, sep, suffix = version.partition(FEATURE_SEPARATOR)
    if not sep:
        return base, None
    return base, suffix


def has_feature_suffix(version: str) -> bool:
    return FEATURE_SEPARATOR in version


def feature_timestamp(version: str) -> Optional[datetime]:
    """Return the UTC time encoded in a feature suffix, if it is an epoch."""
    _, suffix = split_feature_version(version)
    if not suffix or not suffix.isdigit():
        return None
    return datetime.fromtimestamp(int(suffix), tz=timezone.utc)


def get_package_version(pkg_path: Union[str, Path] = ".") -> str:
    """Read the version of the package at ``pkg_path`` without modifying it."""
    return PackageDescriptor.from_package(pkg_path).version


def add_feature_version(pkg_path: Union[str, Path] = ".", clock: Optional[Clock] = None) -> str:
    """Add a feature version number to a package.

    Any existing feature suffix is dropped first, so calling this on a
    feature version re-stamps it with the current time.

    Args:
        pkg_path: Path to the package directory. Defaults to the current directory.
        clock: Callable returning epoch seconds. Defaults to ``time.time``.

    Returns:
        str: The new version written to DESCRIPTION.

    Raises:
        DescriptorError: If DESCRIPTION is missing, malformed or not writable.
    """
    if clock is None:
        clock = time.time

    descriptor = PackageDescriptor.from_package(pkg_path)
    base, _ = split_feature_version(descriptor.version)

    feature_version = f"{base}{FEATURE_SEPARATOR}{int(clock())}"
    descriptor.set_version(feature_version)
    descriptor.write()
    return feature_version


def remove_feature_version(pkg_path: Union[str, Path] = ".") -> str:
    """Remove the feature version number from a package.

    Reverts :func:`add_feature_version`. A version without a suffix is left
    as is and the file is not rewritten.

    Args:
        pkg_path: Path to the package directory. Defaults to the current directory.

    Returns:
        str: The build version left in DESCRIPTION.

    Raises:
        DescriptorError: If DESCRIPTION is missing, malformed or not writable.
    """
    descriptor = PackageDescriptor.from_package(pkg_path)
    version = descriptor.version
    base, _ = split_feature_version(version)

    if base != version:
        descriptor.set_version(base)
        descriptor.write()
    return base
