import threading

from twisted.internet.defer import Deferred

from runasync.core import launch, as_coroutine
from runasync.twisted_stack.utils import resolver_to_df


def _default_reactor():
    from twisted.internet import reactor
    return reactor


class EventLoop(object):
    """
    Runs on the global Twisted reactor unless given another one; anything
    providing callLater (twisted.internet.task.Clock, for one) will do for
    queueing tasks.
    """
    def __init__(self, reactor=None):
        self._reactor = reactor or _default_reactor()
        self._halted = False
        self._thread_ident = threading.get_ident()

    def queue_task(self, delay, callable, *args, **kw):
        if threading.get_ident() != self._thread_ident:
            self._reactor.callFromThread(self._reactor.callLater, delay,
                                         launch, callable, *args, **kw)
        else:
            self._reactor.callLater(delay, launch, callable, *args, **kw)

    def run(self):
        if not self._halted:
            self._thread_ident = threading.get_ident()
            self._reactor.run()

    def halt(self):
        from twisted.internet.error import ReactorNotRunning
        try:
            self._reactor.stop()
        except ReactorNotRunning:
            self._halted = True

    def make_deferred(self, resolver):
        return resolver_to_df(resolver)

    def to_deferred(self, awaitable):
        return Deferred.fromCoroutine(as_coroutine(awaitable))
