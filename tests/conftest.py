import pytest

from jack.builtins import register
from jack.types import Environment


@pytest.fixture
def calls():
    """Values recorded by the `note` host function, in call order."""
    return []


@pytest.fixture
def env(calls):
    """Fresh global environment with host bindings plus a `note` recorder.

    `note` records its single argument, or the tuple of arguments when called
    with several, and returns no value.
    """
    e = Environment()
    register(e)
    e.define("note", lambda *args: calls.append(args[0] if len(args) == 1 else args))
    return e


@pytest.fixture(autouse=True)
def _fatal_policy_from_env(monkeypatch):
    # Keep the process-level default out of the tests; they opt in explicitly.
    monkeypatch.delenv("JACK_ON_FATAL", raising=False)
    monkeypatch.delenv("JACK_LOG_LEVEL", raising=False)
