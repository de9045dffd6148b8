import pytest

SAMPLE_DESCRIPTION = (
    "Package: foo\n"
    "Version: 0.0.0.9000\n"
    "License: MIT\n"
)


@pytest.fixture
def make_package(tmp_path):
    """Factory writing a DESCRIPTION file into a fresh package directory."""

    def _make(content: str = SAMPLE_DESCRIPTION, name: str = "pkg"):
        pkg_dir = tmp_path / name
        pkg_dir.mkdir()
        (pkg_dir / "DESCRIPTION").write_bytes(content.encode("utf-8"))
        return pkg_dir

    return _make


@pytest.fixture
def package(make_package):
    return make_package()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep ~/.featver/config.json out of the tests."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr("featver.config.CONFIG_DIR", str(config_dir))
    monkeypatch.setattr("featver.config.CONFIG_FILE", str(config_dir / "config.json"))
    return config_dir
