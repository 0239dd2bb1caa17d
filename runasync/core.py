import sys
import time
import logging
import inspect
import threading
import asyncio
import concurrent.futures

from twisted.internet.defer import Deferred as TwistedDeferred

from runasync.callback import Completion, CompletionToken
from runasync.stack import eventloop

log = logging.getLogger("runasync")

blocking_warn_threshold = 500 # ms

_CANCELLED = (asyncio.CancelledError, concurrent.futures.CancelledError)
_FAULTS = (Exception,) + _CANCELLED


class AsyncContextError(RuntimeError):
    pass


class Context(object):
    """
    The execution context a work function runs in.  A work function that
    wants to finish later asks for a completion token::

        def fetch(url):
            done = runasync.async_()
            client.get(url, on_response=lambda body: done(None, body))

    Only a request made while the work function is still running counts;
    once it has returned the context is closed.
    """
    def __init__(self, completion):
        self._completion = completion
        self.async_requested = False
        self.closed = False

    def async_(self):
        if self.closed:
            raise AsyncContextError("async_() called after the work function "
                                    "returned; request the token before returning")
        self.async_requested = True
        return CompletionToken(self._completion)


_local = threading.local()


def _contexts():
    try:
        return _local.contexts
    except AttributeError:
        _local.contexts = []
        return _local.contexts


def current_context():
    contexts = _contexts()
    if not contexts:
        raise AsyncContextError("no work function is being dispatched")
    return contexts[-1]


def async_():
    return current_context().async_()


def _name(f):
    return getattr(f, '__qualname__', None) or getattr(f, '__name__', None) or repr(f)


def _warn_if_blocked(f, start):
    duration = (time.time() - start) * 1000
    if duration > blocking_warn_threshold:
        log.warning("work function '%s' blocked for %dms", _name(f), duration)


def _future_result(future, complete):
    try:
        error = future.exception()
    except _CANCELLED as e:
        complete(e)
        return
    if error is not None:
        complete(error)
    else:
        complete(None, future.result())


def _watch_future(future, complete):
    try:
        future.add_done_callback(
            lambda future: eventloop.queue_task(0, _future_result, future, complete))
    except _FAULTS as e:
        complete(e)


def _attach(result, complete):
    then = getattr(result, 'then', None)
    if callable(then):
        then(lambda value: complete(None, value),
             lambda reason: complete(reason))
    elif isinstance(result, TwistedDeferred):
        result.addCallbacks(lambda value: complete(None, value),
                            lambda f: complete(f.value))
    elif callable(getattr(result, 'add_done_callback', None)):
        # watch from the loop; futures may finish on another thread
        eventloop.queue_task(0, _watch_future, result, complete)
    elif inspect.isawaitable(result):
        _attach(eventloop.to_deferred(result), complete)
    else:
        eventloop.queue_task(0, complete, None, result)


def dispatch(handler, f, *args, **kw):
    complete = Completion(handler)
    context = Context(complete)
    contexts = _contexts()
    contexts.append(context)
    start = time.time()
    try:
        result = f(*args, **kw)
    except _FAULTS as e:
        eventloop.queue_task(0, complete, e)
        return
    finally:
        context.closed = True
        contexts.pop()
        _warn_if_blocked(f, start)

    if context.async_requested:
        return
    try:
        _attach(result, complete)
    except _FAULTS as e:
        eventloop.queue_task(0, complete, e)


def log_exception(e=None):
    if e is None:
        e = sys.exc_info()[1]
    log.error("%s", e, exc_info=(type(e), e, e.__traceback__))


def launch(f, *args, **kw):
    try:
        return f(*args, **kw)
    except Exception as e:
        log_exception(e)


def as_coroutine(awaitable):
    if inspect.iscoroutine(awaitable):
        return awaitable

    async def wait():
        return await awaitable
    return wait()
