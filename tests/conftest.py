from pathlib import Path

import pytest

from cargoshell.errors import InvocationError
from cargoshell.session import SessionState


class FakeKernel:
    """Records invocations instead of spawning rustup."""

    def __init__(self, fail_on=(), watch_available=True, interrupt_on=()):
        self.invocations = []
        self.fail_on = set(fail_on)
        # subcommands that behave as if the user pressed Ctrl-C while they ran
        self.interrupt_on = set(interrupt_on)
        self.watch_available = watch_available
        self.watch_checks = 0

    def run(self, invocation):
        self.invocations.append(invocation)
        if invocation.args and invocation.args[0] in self.interrupt_on:
            raise KeyboardInterrupt
        if invocation.toolchain in self.fail_on:
            raise InvocationError(
                "Could not execute rustup run command: boom",
                argv=invocation.argv,
                returncode=101,
            )
        return 0

    def has_cargo_watch(self):
        self.watch_checks += 1
        return self.watch_available

    @property
    def calls(self):
        return [(inv.toolchain, list(inv.args)) for inv in self.invocations]


@pytest.fixture
def kernel():
    return FakeKernel()


@pytest.fixture
def state(tmp_path):
    return SessionState(
        prompt=">> ",
        rustup=Path("/opt/cargo/bin/rustup"),
        name="foo",
        version="1.2.0",
        default_toolchain="stable",
        toolchains=["stable", "beta", "nightly"],
        cwd=tmp_path,
    )


@pytest.fixture
def make_state(tmp_path):
    def _make(**overrides):
        fields = dict(
            prompt=">> ",
            rustup=Path("/opt/cargo/bin/rustup"),
            name="foo",
            version="1.2.0",
            default_toolchain="stable",
            toolchains=["stable", "beta", "nightly"],
            cwd=tmp_path,
        )
        fields.update(overrides)
        return SessionState(**fields)

    return _make


@pytest.fixture
def make_kernel():
    return FakeKernel
