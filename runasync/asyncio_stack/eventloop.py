import asyncio
import threading

from runasync.core import launch, as_coroutine


class EventLoop(object):
    """
    Without an explicit loop, tasks go to whichever asyncio loop is running
    in the calling thread (asyncio.run(), say), falling back to a private
    loop that run() drives.  Calls from other threads are handed to the
    loop most recently used on the loop thread.
    """
    def __init__(self, loop=None):
        self._given_loop = loop
        self._loop = loop
        self._thread_ident = threading.get_ident()

    @property
    def loop(self):
        if self._given_loop is not None:
            return self._given_loop
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is not None:
            self._loop = running
            self._thread_ident = threading.get_ident()
        elif self._loop is None or self._loop.is_closed():
            self._loop = asyncio.new_event_loop()
            self._thread_ident = threading.get_ident()
        return self._loop

    def queue_task(self, delay, callable, *args, **kw):
        def task():
            launch(callable, *args, **kw)
        loop = self.loop
        if threading.get_ident() != self._thread_ident:
            loop.call_soon_threadsafe(loop.call_later, delay, task)
        else:
            loop.call_later(delay, task)

    def run(self):
        loop = self.loop
        self._thread_ident = threading.get_ident()
        loop.run_forever()

    def halt(self):
        self.loop.stop()

    def make_deferred(self, resolver):
        future = self.loop.create_future()

        def resolve(value=None):
            if not future.done():
                future.set_result(value)

        def reject(error):
            if not future.done():
                future.set_exception(error)

        resolver(resolve, reject)
        return future

    def to_deferred(self, awaitable):
        return self.loop.create_task(as_coroutine(awaitable))
