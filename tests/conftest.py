"""
Shared fixtures: event loops for each stack, installed for the duration of
a test, plus a minimal promise-shaped object for the duck-typed path.
"""

import asyncio

import pytest
from twisted.internet.task import Clock

from runasync.stack import eventloop
from runasync.asyncio_stack.eventloop import EventLoop as AsyncioEventLoop
from runasync.twisted_stack.eventloop import EventLoop as TwistedEventLoop


@pytest.fixture(autouse=True)
def fresh_stack(monkeypatch):
    monkeypatch.setattr(eventloop, "_stack_name", None)
    previous = eventloop.install(None)
    yield
    eventloop.install(previous)


@pytest.fixture
def clock():
    clock = Clock()
    eventloop.install(TwistedEventLoop(clock))
    return clock


@pytest.fixture
def aio_loop():
    loop = asyncio.new_event_loop()
    eventloop.install(AsyncioEventLoop(loop))
    # never hang a test run on a handler that doesn't fire
    loop.call_later(5, loop.stop)
    yield loop
    loop.close()


class Recorder(object):
    """Handler that remembers every (error, value) it is called with."""

    def __init__(self, on_call=None):
        self.calls = []
        self._on_call = on_call

    def __call__(self, error, value):
        self.calls.append((error, value))
        if self._on_call is not None:
            self._on_call()

    @property
    def error(self):
        return self.calls[0][0]

    @property
    def value(self):
        return self.calls[0][1]


@pytest.fixture
def recorder():
    return Recorder()


class Thenable(object):
    """Promise lookalike: settled by hand, executor-style constructor."""

    def __init__(self, executor=None):
        self._fulfilled = []
        self._rejected = []
        self.state = "pending"
        self.result = None
        if executor is not None:
            executor(self.resolve, self.reject)

    def then(self, on_fulfilled=None, on_rejected=None):
        if on_fulfilled is not None:
            self._fulfilled.append(on_fulfilled)
        if on_rejected is not None:
            self._rejected.append(on_rejected)
        self._flush()
        return self

    def resolve(self, value=None):
        self._settle("fulfilled", value)

    def reject(self, reason):
        self._settle("rejected", reason)

    def _settle(self, state, result):
        if self.state != "pending":
            return
        self.state = state
        self.result = result
        self._flush()

    def _flush(self):
        if self.state == "pending":
            return
        callbacks = self._fulfilled if self.state == "fulfilled" else self._rejected
        self._fulfilled, self._rejected = [], []
        for callback in callbacks:
            callback(self.result)
