"""Package descriptor (DESCRIPTION) model and version field access."""

import os
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

DESCRIPTOR_FILENAME = "DESCRIPTION"
VERSION_KEY = "Version:"
VERSION_PREFIX = "Version: "


class DescriptorError(Exception):
    """Base class for errors raised while reading or writing a descriptor."""


class DescriptorNotFoundError(DescriptorError, FileNotFoundError):
    """The package directory has no DESCRIPTION file."""


class VersionFieldNotFoundError(DescriptorError, ValueError):
    """The descriptor has no usable ``Version:`` line."""


class DuplicateVersionFieldError(DescriptorError, ValueError):
    """The descriptor has more than one ``Version:`` line."""


class DescriptorWriteError(DescriptorError, OSError):
    """The updated descriptor could not be written back to disk."""


def _line_ending(line: str) -> str:
    return line[len(line.rstrip("\r\n")):]


@dataclass
class PackageDescriptor:
    """A descriptor file held in memory as its original lines.

    Each entry of ``lines`` keeps its own line terminator so that rewriting
    the file leaves every line except the version line byte-identical.
    """
    path: Path
    lines: List[str] = field(default_factory=list)
    version_index: int = 0

    @classmethod
    def from_package(cls, pkg_path: Union[str, Path] = ".") -> "PackageDescriptor":
        """Load the DESCRIPTION file of the package at ``pkg_path``.

        Args:
            pkg_path: Path to the package directory

        Returns:
            PackageDescriptor: Loaded descriptor

        Raises:
            DescriptorNotFoundError: If the DESCRIPTION file doesn't exist
            VersionFieldNotFoundError: If no line holds a version
            DuplicateVersionFieldError: If more than one line holds a version
        """
        return cls.from_file(Path(pkg_path) / DESCRIPTOR_FILENAME)

    @classmethod
    def from_file(cls, descriptor_path: Path) -> "PackageDescriptor":
        """Load a descriptor from an explicit file path."""
        if not descriptor_path.is_file():
            raise DescriptorNotFoundError(f"DESCRIPTION not found: {descriptor_path}")

        # newline='' keeps \r\n and a missing final newline untouched, and
        # surrogateescape round-trips bytes of non-UTF-8 (e.g. latin1) descriptors
        with open(descriptor_path, 'r', encoding='utf-8', errors='surrogateescape', newline='') as f:
            lines = f.readlines()

        matches = [i for i, line in enumerate(lines) if line.startswith(VERSION_KEY)]
        if not matches:
            raise VersionFieldNotFoundError(f"No '{VERSION_KEY}' line in {descriptor_path}")
        if len(matches) > 1:
            numbers = ", ".join(str(i + 1) for i in matches)
            raise DuplicateVersionFieldError(
                f"Multiple '{VERSION_KEY}' lines in {descriptor_path} (lines {numbers})"
            )

        descriptor = cls(path=descriptor_path, lines=lines, version_index=matches[0])
        if not descriptor.version:
            raise VersionFieldNotFoundError(
                f"Empty version at line {matches[0] + 1} of {descriptor_path}"
            )
        return descriptor

    @property
    def version(self) -> str:
        """Current value of the version field."""
        return self.lines[self.version_index][len(VERSION_KEY):].strip()

    def set_version(self, value: str) -> None:
        """Replace the version line, keeping its line terminator."""
        ending = _line_ending(self.lines[self.version_index])
        self.lines[self.version_index] = f"{VERSION_PREFIX}{value}{ending}"

    def write(self) -> None:
        """Write all lines back, replacing the file atomically.

        Raises:
            DescriptorWriteError: If the temporary file cannot be created,
                written or moved into place. The original file is left as is.
        """
        # a symlinked DESCRIPTION is updated at its target
        target = self.path.resolve()
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=".featver-", dir=str(target.parent))
        except OSError as e:
            raise DescriptorWriteError(f"Cannot write to {target.parent}: {e}") from e

        try:
            with os.fdopen(fd, 'w', encoding='utf-8', errors='surrogateescape', newline='') as fh:
                fh.write("".join(self.lines))
            shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
        except OSError as e:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise DescriptorWriteError(f"Failed to write {self.path}: {e}") from e
