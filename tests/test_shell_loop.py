import pytest

from cargoshell.interface.cli import BaseCLI
from cargoshell.interface.shell import run_shell


class ScriptedCLI(BaseCLI):
    """Feeds canned lines; items that are exception classes are raised."""

    def __init__(self, items):
        self.items = list(items)
        self.prompts = []
        self.torn_down = False

    def get_line(self, prompt):
        self.prompts.append(prompt)
        if not self.items:
            raise EOFError
        item = self.items.pop(0)
        if isinstance(item, type) and issubclass(item, BaseException):
            raise item
        return item

    def teardown(self):
        self.torn_down = True


def test_loop_runs_until_eof(state, kernel):
    cli = ScriptedCLI(["build", "test"])
    assert run_shell(state, cli, kernel=kernel) == 0
    assert kernel.calls == [("stable", ["build"]), ("stable", ["test"])]
    assert cli.torn_down


def test_failed_command_does_not_stop_the_loop(state, make_kernel, capsys):
    kernel = make_kernel(fail_on={"beta"})
    cli = ScriptedCLI(["++ beta build", "build"])
    assert run_shell(state, cli, kernel=kernel) == 0
    assert kernel.calls == [("beta", ["build"]), ("stable", ["build"])]
    assert "Could not execute rustup run command" in capsys.readouterr().out


def test_interrupt_reprompts(state, kernel):
    cli = ScriptedCLI([KeyboardInterrupt, "check"])
    run_shell(state, cli, kernel=kernel)
    assert kernel.calls == [("stable", ["check"])]
    assert len(cli.prompts) == 3


def test_prompt_reflects_state_changes(state, kernel):
    cli = ScriptedCLI(['p "{project}@{toolchain}> "', "++ nightly"])
    run_shell(state, cli, kernel=kernel)
    assert cli.prompts == [">> ", "foo@stable> ", "foo@nightly> "]


def test_exit_leaves_loop_and_tears_down(state, kernel):
    cli = ScriptedCLI(["exit", "build"])
    with pytest.raises(SystemExit):
        run_shell(state, cli, kernel=kernel)
    assert cli.torn_down
    assert kernel.invocations == []


def test_missing_batch_file_is_reported(state, kernel, tmp_path, capsys):
    cli = ScriptedCLI([f"< {tmp_path / 'missing.txt'}", "build"])
    run_shell(state, cli, kernel=kernel)
    assert "Could not open filename" in capsys.readouterr().out
    assert kernel.calls == [("stable", ["build"])]


def test_interrupting_watch_returns_to_prompt(state, make_kernel):
    kernel = make_kernel(interrupt_on={"watch"})
    cli = ScriptedCLI(["~ -x check", "build"])
    assert run_shell(state, cli, kernel=kernel) == 0
    assert kernel.calls == [("stable", ["watch", "-x", "check"]), ("stable", ["build"])]
    assert len(cli.prompts) == 3


def test_interrupted_fan_out_restores_toolchain(make_state, make_kernel):
    state = make_state(toolchains=["stable", "beta"])
    kernel = make_kernel(interrupt_on={"test"})
    cli = ScriptedCLI(["++ beta", "+ test", "build"])
    run_shell(state, cli, kernel=kernel)
    assert kernel.calls == [("stable", ["test"]), ("beta", ["build"])]
    assert state.current_toolchain == "beta"
