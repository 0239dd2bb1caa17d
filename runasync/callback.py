import logging

log = logging.getLogger("runasync")


# Sort of like a Callback that can only ever be called back once.  Every
# path that can finish a dispatch funnels through one of these, so the
# handler runs exactly once no matter how the work function misbehaves.
class Completion(object):
    def __init__(self, handler):
        if not callable(handler):
            raise TypeError("'%s' object is not callable" % type(handler).__name__)
        self._handler = handler
        self.fired = False

    def __call__(self, error=None, value=None):
        if self.fired:
            log.debug("ignoring duplicate completion for %r (error: %r, value: %r)",
                      self._handler, error, value)
            return
        self.fired = True
        self._handler(error, value)


class CompletionToken(object):
    """
    Handed out by Context.async_().  Call it once with (error, value) to
    finish the dispatch; any later call does nothing.
    """
    def __init__(self, completion):
        self._completion = completion
        self.called = False

    def __call__(self, error=None, value=None):
        if self.called:
            return
        self.called = True
        self._completion(error, value)

    def __repr__(self):
        return "<%s.%s object at 0x%x; called: %s>" % (self.__class__.__module__,
                                                       self.__class__.__name__,
                                                       id(self),
                                                       self.called)
