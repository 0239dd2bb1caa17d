from runasync.core import dispatch
from runasync.stack import eventloop


def promisify(deferred_constructor=None):
    """
    Return a function that runs work through dispatch() and hands back a
    deferred value instead of taking a handler::

        run = promisify()
        d = run(fetch, url)

    deferred_constructor is called with a resolver(resolve, reject), the
    way promise classes take their executor.  Without one, the native
    deferred of the current stack is used: a twisted Deferred, or an
    asyncio/tornado future.
    """
    make = deferred_constructor or eventloop.make_deferred

    def wrapped(f, *args, **kw):
        def resolver(resolve, reject):
            def settle(error, value):
                if error is not None:
                    reject(error)
                else:
                    resolve(value)
            dispatch(settle, f, *args, **kw)
        return make(resolver)
    return wrapped
