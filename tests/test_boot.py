import pytest

from cargoshell import __main__ as entry
from cargoshell.boot import boot_sequence
from cargoshell.errors import ConfigError, SelectorNotFoundError
from cargoshell.interface.cli import BaseCLI


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "crate"
    root.mkdir()
    (root / "Cargo.toml").write_text('[package]\nname = "demo"\nversion = "0.3.1"\n', encoding="utf-8")
    (root / ".cargo").mkdir()
    (root / ".cargo" / "config.toml").write_text(
        '[cargo-shell]\nprompt = "{project} {version} [{toolchain}]> "\n'
        'default-toolchain = "beta"\ntoolchains = ["beta", "nightly"]\n',
        encoding="utf-8",
    )
    return root


@pytest.fixture
def cargo_home(tmp_path):
    bin_dir = tmp_path / "cargo-home" / "bin"
    bin_dir.mkdir(parents=True)
    rustup = bin_dir / "rustup"
    rustup.write_text("#!/bin/sh\n", encoding="utf-8")
    rustup.chmod(0o755)
    return tmp_path / "cargo-home"


def _plain_cli(toolchains, **kwargs):
    cli = BaseCLI()
    cli.toolchains = toolchains
    cli.kwargs = kwargs
    return cli


def test_boot_builds_session(project, cargo_home, tmp_path):
    env = {"CARGO_HOME": str(cargo_home), "PATH": "", "CARGO_SHELL_HISTORY_FILE": str(tmp_path / "hist")}
    boot = boot_sequence(project, env, cli_factory=_plain_cli)
    session = boot.session
    assert session.name == "demo"
    assert session.version == "0.3.1"
    assert session.current_toolchain == "beta"
    assert session.toolchains == ("beta", "nightly")
    assert session.rustup == cargo_home / "bin" / "rustup"
    assert session.cwd == project
    assert session.render_prompt() == "demo 0.3.1 [beta]> "
    assert boot.cli.toolchains() == ("beta", "nightly")
    assert boot.cli.kwargs["history_path"] == tmp_path / "hist"


def test_boot_fails_without_rustup(project, tmp_path, capsys):
    env = {"CARGO_HOME": str(tmp_path / "empty-home"), "PATH": ""}
    with pytest.raises(SelectorNotFoundError):
        boot_sequence(project, env, cli_factory=_plain_cli)
    assert "[FAILED] Locate rustup binary" in capsys.readouterr().out


def test_main_exits_255_on_startup_error(monkeypatch, capsys):
    def _fail():
        raise ConfigError("Could not find root manifest for project")

    monkeypatch.setattr(entry, "boot_sequence", _fail)
    assert entry.main() == entry.STARTUP_FAILURE == 255
    captured = capsys.readouterr()
    assert "Welcome to cargo-shell" in captured.out
    assert "Error was Could not find root manifest" in captured.err
