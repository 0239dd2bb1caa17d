import sys

import runasync
runasync.init(sys.argv[1] if len(sys.argv) > 1 else 'asyncio')

from runasync import dispatch, promisify
from runasync.stack import eventloop
from runasync.util import sleep


def square(x):
    return x * x


def fail():
    raise Exception("boo")


def later(x):
    done = runasync.async_()
    eventloop.queue_task(0.5, done, None, x)


def slow_square(x):
    return sleep(1, x * x)


pending = set(['square', 'fail', 'later', 'slow_square'])


def report(name):
    def handler(error, value):
        if error is not None:
            print("%s failed: %s: %s" % (name, type(error).__name__, error))
        else:
            print("%s: %r" % (name, value))
        pending.discard(name)
        if not pending:
            eventloop.halt()
    return handler


dispatch(report('square'), square, 5)
dispatch(report('fail'), fail)
dispatch(report('later'), later, 'called back')
dispatch(report('slow_square'), slow_square, 7)
print("dispatched, waiting on the %s event loop" % runasync.stack_name_in_use())

# the same work, through the stack's own deferred type
print(promisify()(square, 3))

eventloop.run()
