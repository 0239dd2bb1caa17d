import sys

import runasync
runasync.init(sys.argv[1] if len(sys.argv) > 1 else 'asyncio')

from runasync.stack import eventloop
from runasync.util import sleep


def print_later(x):
    done = runasync.async_()
    eventloop.queue_task(1, done, None, x)


def handler(error, value):
    print(value)


def fail():
    raise Exception("whoo")


def log_failure(error, value):
    print("failed: %s" % error)
    eventloop.queue_task(1.5, eventloop.halt)


eventloop.queue_task(0, runasync.dispatch, handler, print_later, "token worked")
eventloop.queue_task(0, runasync.dispatch, handler, sleep, 0.5, "deferred worked")
eventloop.queue_task(0, runasync.dispatch, handler, lambda: "function worked")
eventloop.queue_task(0, runasync.dispatch, log_failure, fail)
eventloop.run()
