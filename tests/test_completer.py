"""
Tests for the prompt_toolkit tab completer.
"""

from prompt_toolkit.document import Document

from netsim_lib.repl import Mode, CommandCompleter


def completions(ctx, text):
    completer = CommandCompleter(ctx, ctx.commands)
    return [c.text for c in completer.get_completions(Document(text), None)]


def test_first_word_in_user_mode(ctx):
    assert completions(ctx, "") == ["enable", "exit", "help", "show"]


def test_partial_word(ctx):
    ctx.mode = Mode.PRIVILEGED
    assert completions(ctx, "con") == ["configure"]


def test_next_keyword(ctx):
    ctx.mode = Mode.PRIVILEGED
    assert completions(ctx, "show ip ") == ["interface", "ospf", "route"]


def test_partial_second_word(ctx):
    ctx.mode = Mode.PRIVILEGED
    assert completions(ctx, "show ru") == ["running-config"]


def test_start_position_replaces_partial_word(ctx):
    ctx.mode = Mode.PRIVILEGED
    completer = CommandCompleter(ctx, ctx.commands)
    result = list(completer.get_completions(Document("show ver"), None))
    assert [c.start_position for c in result] == [-3]


def test_follows_mode(ctx):
    ctx.mode = Mode.ROUTER
    assert "network" in completions(ctx, "")
    assert "show" not in completions(ctx, "")


def test_no_completion_past_command(ctx):
    ctx.mode = Mode.PRIVILEGED
    assert completions(ctx, "show version ") == []


def test_do_completes_exec_commands(ctx):
    ctx.mode = Mode.CONFIG
    assert completions(ctx, "do show ver") == ["version"]
    assert "configure" not in completions(ctx, "do ")
    assert "write" in completions(ctx, "do ")
