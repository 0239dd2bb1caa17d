import threading

import tornado.ioloop

from runasync.core import launch, as_coroutine


class EventLoop(object):
    def __init__(self, ioloop=None):
        self._tornado_ioloop = ioloop or tornado.ioloop.IOLoop.current()
        self._thread_ident = threading.get_ident()

    def queue_task(self, delay, callable, *args, **kw):
        def task():
            launch(callable, *args, **kw)
        if threading.get_ident() != self._thread_ident:
            self._tornado_ioloop.add_callback(self._tornado_ioloop.call_later,
                                              delay, task)
        else:
            self._tornado_ioloop.call_later(delay, task)

    def run(self):
        self._thread_ident = threading.get_ident()
        self._tornado_ioloop.start()

    def halt(self):
        self._tornado_ioloop.stop()

    def make_deferred(self, resolver):
        future = self._tornado_ioloop.asyncio_loop.create_future()

        def resolve(value=None):
            if not future.done():
                future.set_result(value)

        def reject(error):
            if not future.done():
                future.set_exception(error)

        resolver(resolve, reject)
        return future

    def to_deferred(self, awaitable):
        return self._tornado_ioloop.asyncio_loop.create_task(as_coroutine(awaitable))
