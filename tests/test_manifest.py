import pytest

from cargoshell.config import read_package
from cargoshell.errors import ConfigError


def _manifest(directory, text):
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "Cargo.toml").write_text(text, encoding="utf-8")


def test_reads_name_and_version(tmp_path):
    _manifest(tmp_path, '[package]\nname = "foo"\nversion = "1.2.3"\n')
    info = read_package(tmp_path)
    assert (info.name, info.version) == ("foo", "1.2.3")
    assert info.manifest_path == (tmp_path / "Cargo.toml").resolve()


def test_walks_up_from_subdirectory(tmp_path):
    _manifest(tmp_path, '[package]\nname = "foo"\nversion = "0.4.0"\n')
    nested = tmp_path / "src" / "bin"
    nested.mkdir(parents=True)
    assert read_package(nested).name == "foo"


def test_version_defaults(tmp_path):
    _manifest(tmp_path, '[package]\nname = "foo"\n')
    assert read_package(tmp_path).version == "0.0.0"


def test_workspace_inherited_version(tmp_path):
    _manifest(tmp_path, '[workspace]\nmembers = ["member"]\n\n[workspace.package]\nversion = "2.0.1"\n')
    _manifest(tmp_path / "member", '[package]\nname = "member"\nversion.workspace = true\n')
    assert read_package(tmp_path / "member").version == "2.0.1"


def test_virtual_workspace_is_an_error(tmp_path):
    _manifest(tmp_path, '[workspace]\nmembers = []\n')
    with pytest.raises(ConfigError):
        read_package(tmp_path)


def test_missing_manifest(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    # an ancestor of tmp_path could hold a Cargo.toml on a developer machine
    if any((d / "Cargo.toml").is_file() for d in empty.parents):
        pytest.skip("a parent directory has a Cargo.toml")
    with pytest.raises(ConfigError):
        read_package(empty)


def test_malformed_manifest(tmp_path):
    _manifest(tmp_path, "[package\n")
    with pytest.raises(ConfigError):
        read_package(tmp_path)


def test_root_package_inherits_from_its_own_workspace(tmp_path):
    _manifest(
        tmp_path,
        '[workspace.package]\nversion = "2.0.0"\n\n[package]\nname = "root"\nversion.workspace = true\n',
    )
    info = read_package(tmp_path)
    assert (info.name, info.version) == ("root", "2.0.0")


def test_inherited_version_without_workspace_package(tmp_path):
    _manifest(tmp_path, '[package]\nname = "orphan"\nversion.workspace = true\n')
    if any((d / "Cargo.toml").is_file() for d in tmp_path.parents):
        pytest.skip("a parent directory has a Cargo.toml")
    with pytest.raises(ConfigError):
        read_package(tmp_path)
