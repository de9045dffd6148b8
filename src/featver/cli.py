"""Command-line interface for featver."""

import sys
import click

from rich.table import Table
from rich.text import Text

from featver.version import get_version
from featver.config import get_default_package_path, set_default_package_path
from featver.core.operations import (
    add_feature_version,
    remove_feature_version,
    split_feature_version,
    feature_timestamp,
)
from featver.models.descriptor import PackageDescriptor, DescriptorError
from featver.utils.console import (
    _rich_success, _rich_error, _rich_info, _rich_warning, _rich_panel, _get_console
)


def _resolve_pkg_path(pkg_path):
    """Use the configured default when no package path was given."""
    return pkg_path if pkg_path is not None else get_default_package_path()


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return

    version_text = Text()
    version_text.append("featver", style="bold cyan")
    version_text.append(f" version {get_version()}", style="white")
    _rich_panel(version_text)
    ctx.exit()


@click.group(help="featver: add or remove feature version suffixes in a package DESCRIPTION")
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit.")
@click.pass_context
def cli(ctx):
    """Main entry point for the featver CLI."""
    ctx.ensure_object(dict)


@cli.command(help="Add (or refresh) the feature version suffix")
@click.argument('pkg_path', required=False)
@click.pass_context
def add(ctx, pkg_path):
    """Stamp the package version with the current epoch."""
    pkg_path = _resolve_pkg_path(pkg_path)
    clock = ctx.obj.get('clock')
    try:
        old_version = PackageDescriptor.from_package(pkg_path).version
        new_version = add_feature_version(pkg_path, clock=clock)
    except DescriptorError as e:
        _rich_error(f"Error adding feature version: {e}", symbol="error")
        sys.exit(1)

    _rich_success(f"Version: {old_version} -> {new_version}", symbol="success")


@cli.command(help="Remove the feature version suffix")
@click.argument('pkg_path', required=False)
def remove(pkg_path):
    """Strip the feature suffix, restoring the build version."""
    pkg_path = _resolve_pkg_path(pkg_path)
    try:
        old_version = PackageDescriptor.from_package(pkg_path).version
        base_version = remove_feature_version(pkg_path)
    except DescriptorError as e:
        _rich_error(f"Error removing feature version: {e}", symbol="error")
        sys.exit(1)

    if old_version == base_version:
        _rich_info(f"No feature version to remove (Version: {base_version})", symbol="info")
    else:
        _rich_success(f"Version: {old_version} -> {base_version}", symbol="success")


@cli.command(help="Show the package version and its feature suffix")
@click.argument('pkg_path', required=False)
def show(pkg_path):
    """Display the version field of a package DESCRIPTION."""
    pkg_path = _resolve_pkg_path(pkg_path)
    try:
        descriptor = PackageDescriptor.from_package(pkg_path)
    except DescriptorError as e:
        _rich_error(f"Error reading version: {e}", symbol="error")
        sys.exit(1)

    version = descriptor.version
    base, suffix = split_feature_version(version)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Field", style="bold yellow")
    table.add_column("Value", style="white")
    table.add_row("Descriptor", str(descriptor.path))
    table.add_row("Version", version)
    table.add_row("Build version", base)
    table.add_row("Feature suffix", suffix if suffix is not None else "none")

    created = feature_timestamp(version)
    if created is not None:
        table.add_row("Feature started", created.strftime("%Y-%m-%d %H:%M:%S UTC"))
    elif suffix is not None:
        _rich_warning(f"Feature suffix '{suffix}' is not an epoch timestamp", symbol="warning")

    _get_console().print(table)


@cli.command(help="Configure featver")
@click.option('--show', is_flag=True, help="Show current configuration")
@click.option('--default-path', type=click.Path(file_okay=False, resolve_path=True),
              help="Package path used when a command is given none")
def config(show, default_path):
    """Show or update featver settings."""
    if default_path:
        set_default_package_path(default_path)
        _rich_success(f"Default package path set to {default_path}", symbol="check")

    if show:
        table = Table(title="Current featver Configuration", show_header=True, header_style="bold cyan")
        table.add_column("Setting", style="bold yellow")
        table.add_column("Value", style="cyan")
        table.add_row("Default package path", get_default_package_path())
        table.add_row("featver version", get_version())
        _get_console().print(table)
    elif not default_path:
        _rich_info("Use --show to display configuration", symbol="info")


def main():
    """Main entry point for the CLI."""
    try:
        cli(obj={})
    except Exception as e:
        _rich_error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
