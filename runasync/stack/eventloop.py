"""
The event loop of whichever stack init() selected.  The loop is created
the first time it's needed; install() swaps in a specific one.
"""
import importlib

STACKS = ('asyncio', 'twisted', 'tornado')
DEFAULT_STACK = 'asyncio'

_stack_name = None
_evlp = None


class StackError(Exception):
    pass


def init(stack_name):
    global _stack_name
    if stack_name not in STACKS:
        raise StackError("unknown stack '%s', expected one of: %s" %
                         (stack_name, ', '.join(STACKS)))
    if is_created() and stack_name != stack_name_in_use():
        raise StackError("can't switch to the %s stack, the %s event loop "
                         "has already been created" % (stack_name, stack_name_in_use()))
    _stack_name = stack_name


def stack_name_in_use():
    return _stack_name or DEFAULT_STACK


def is_created():
    return _evlp is not None


def get_eventloop():
    global _evlp
    if _evlp is None:
        module = importlib.import_module("runasync.%s_stack.eventloop" %
                                         stack_name_in_use())
        _evlp = module.EventLoop()
    return _evlp


def install(evlp):
    global _evlp
    previous, _evlp = _evlp, evlp
    return previous


def queue_task(delay, callable, *args, **kw):
    return get_eventloop().queue_task(delay, callable, *args, **kw)


def run():
    get_eventloop().run()


def halt():
    get_eventloop().halt()


def make_deferred(resolver):
    return get_eventloop().make_deferred(resolver)


def to_deferred(awaitable):
    return get_eventloop().to_deferred(awaitable)
