from runasync.stack import eventloop


def sleep(seconds, value=None):
    def resolver(resolve, reject):
        eventloop.queue_task(seconds, resolve, value)
    return eventloop.make_deferred(resolver)
