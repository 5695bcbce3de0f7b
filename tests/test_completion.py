from cargoshell.interface.completion import suggest

TOOLCHAINS = ("stable", "beta", "nightly")


def test_first_token_builtins_and_subcommands():
    assert suggest("he") == ["help"]
    assert suggest("b") == ["bench", "build"]


def test_toolchains_after_double_plus():
    assert suggest("++ ", TOOLCHAINS) == ["beta", "nightly", "stable"]
    assert suggest("++ n", TOOLCHAINS) == ["nightly"]
    assert suggest("++n", TOOLCHAINS) == ["nightly"]


def test_subcommand_after_toolchain():
    assert suggest("++ beta te", TOOLCHAINS) == ["test"]


def test_fan_out_and_watch_complete_subcommands():
    assert suggest("+ cl") == ["clean", "clippy"]
    assert suggest("~che") == ["check"]


def test_no_suggestions_for_later_arguments():
    assert suggest("build --rel") == []
    assert suggest("+ test --") == []


def test_current_token_ignores_glued_markers():
    from cargoshell.interface.completion import current_token

    assert current_token("++n") == "n"
    assert current_token("+ cl") == "cl"
    assert current_token("build --rel") == "--rel"
    assert current_token("++ beta ") == ""
