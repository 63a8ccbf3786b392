import pytest

from cafelatte.commands import CommandDispatcher


def test_register_replaces_previous_handler():
    dispatcher = CommandDispatcher()
    dispatcher.register("ping", lambda: "first")
    dispatcher.register("ping", lambda: "second")
    assert dispatcher.dispatch("ping") == "second"


def test_dispatch_passes_payload():
    dispatcher = CommandDispatcher()
    dispatcher.register("echo", lambda **payload: payload)
    assert dispatcher.dispatch("echo", name="Ana") == {"name": "Ana"}


def test_unregistered_command_raises():
    dispatcher = CommandDispatcher()
    dispatcher.register("ping", lambda: None)
    dispatcher.unregister("ping")
    assert "ping" not in dispatcher
    with pytest.raises(KeyError, match="ping"):
        dispatcher.dispatch("ping")


def test_payload_may_use_the_name_key():
    dispatcher = CommandDispatcher()
    dispatcher.register("greet", lambda name: f"hi {name}")
    assert dispatcher.dispatch("greet", name="Ana") == "hi Ana"


def test_document_dispatch_payload_may_use_the_command_key():
    from cafelatte.document import HostDocument

    document = HostDocument("<html><body></body></html>")
    document.commands.register("run", lambda command: command.upper())
    assert document.dispatch("run", command="brew") == "BREW"
