import pytest
from click.testing import CliRunner

from featver.cli import cli
from featver.config import get_default_package_path, set_default_package_path


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, args, clock=lambda: 1700000000):
    return runner.invoke(cli, args, obj={"clock": clock})


def test_version_option(runner):
    result = invoke(runner, ["--version"])

    assert result.exit_code == 0
    assert "featver" in result.output


def test_add_command(runner, package):
    result = invoke(runner, ["add", str(package)])

    assert result.exit_code == 0, result.output
    assert "0.0.0.9000-1700000000" in result.output
    assert "Version: 0.0.0.9000-1700000000\n" in (package / "DESCRIPTION").read_text()


def test_add_twice_restamps(runner, package):
    invoke(runner, ["add", str(package)])
    result = invoke(runner, ["add", str(package)], clock=lambda: 1700000100)

    assert result.exit_code == 0, result.output
    assert "Version: 0.0.0.9000-1700000100\n" in (package / "DESCRIPTION").read_text()


def test_remove_command(runner, package):
    invoke(runner, ["add", str(package)])
    result = invoke(runner, ["remove", str(package)])

    assert result.exit_code == 0, result.output
    assert (package / "DESCRIPTION").read_text() == "Package: foo\nVersion: 0.0.0.9000\nLicense: MIT\n"


def test_remove_without_suffix(runner, package):
    result = invoke(runner, ["remove", str(package)])

    assert result.exit_code == 0
    assert "No feature version to remove" in result.output


def test_show_command(runner, package):
    invoke(runner, ["add", str(package)])
    result = invoke(runner, ["show", str(package)])

    assert result.exit_code == 0, result.output
    assert "0.0.0.9000" in result.output
    assert "1700000000" in result.output
    assert "2023-11-14" in result.output
    assert "22:13:20" in result.output


def test_show_non_epoch_suffix_warns(runner, make_package):
    pkg = make_package("Package: foo\nVersion: 1.0.0-rc1\n")

    result = invoke(runner, ["show", str(pkg)])

    assert result.exit_code == 0
    assert "not an epoch timestamp" in result.output


@pytest.mark.parametrize("command", ["add", "remove", "show"])
def test_missing_descriptor_exits_with_error(runner, tmp_path, command):
    result = invoke(runner, [command, str(tmp_path)])

    assert result.exit_code == 1
    assert "DESCRIPTION not found" in result.output


@pytest.mark.parametrize("command", ["add", "remove"])
def test_missing_version_field_exits_with_error(runner, make_package, command):
    pkg = make_package("Package: foo\n")

    result = invoke(runner, [command, str(pkg)])

    assert result.exit_code == 1
    assert "No 'Version:' line" in result.output
    assert (pkg / "DESCRIPTION").read_text() == "Package: foo\n"


def test_commands_use_configured_default_path(runner, package):
    set_default_package_path(str(package))

    result = invoke(runner, ["add"])

    assert result.exit_code == 0, result.output
    assert "Version: 0.0.0.9000-1700000000\n" in (package / "DESCRIPTION").read_text()


def test_commands_default_to_current_directory(runner, package, monkeypatch):
    monkeypatch.chdir(package)

    result = invoke(runner, ["add"])

    assert result.exit_code == 0, result.output
    assert "Version: 0.0.0.9000-1700000000\n" in (package / "DESCRIPTION").read_text()


def test_config_command(runner, tmp_path):
    result = invoke(runner, ["config", "--default-path", str(tmp_path), "--show"])

    assert result.exit_code == 0, result.output
    assert "Default" in result.output
    assert get_default_package_path() == str(tmp_path.resolve())


def test_config_without_options_prints_hint(runner):
    result = invoke(runner, ["config"])

    assert result.exit_code == 0
    assert "--show" in result.output


def test_relative_default_path_works_from_other_directory(runner, make_package, tmp_path, monkeypatch):
    pkg = make_package(name="mypkg")
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()

    monkeypatch.chdir(tmp_path)
    assert invoke(runner, ["config", "--default-path", "mypkg"]).exit_code == 0

    monkeypatch.chdir(elsewhere)
    result = invoke(runner, ["add"])

    assert result.exit_code == 0, result.output
    assert "Version: 0.0.0.9000-1700000000\n" in (pkg / "DESCRIPTION").read_text()


def test_show_does_not_create_config_file(runner, package, isolated_config):
    result = invoke(runner, ["show", str(package)])

    assert result.exit_code == 0, result.output
    assert not isolated_config.exists()


def test_show_with_default_path_does_not_create_config_file(runner, package, isolated_config, monkeypatch):
    monkeypatch.chdir(package)

    result = invoke(runner, ["show"])

    assert result.exit_code == 0, result.output
    assert not isolated_config.exists()
