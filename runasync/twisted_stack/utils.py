from twisted.python.failure import Failure
from twisted.internet.defer import Deferred


def resolver_to_df(resolver):
    df = Deferred()

    def resolve(value=None, df=df):
        if not df.called:
            df.callback(value)

    def reject(error, df=df):
        if not df.called:
            df.errback(Failure(error, type(error), getattr(error, '__traceback__', None)))

    resolver(resolve, reject)
    return df
