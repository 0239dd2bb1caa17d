VERSION = '0.1.0'

from runasync.stack.eventloop import init, stack_name_in_use, StackError
from runasync.core import (dispatch, launch, async_, current_context,
                           Context, AsyncContextError)
from runasync.callback import Completion, CompletionToken
from runasync.deferred import promisify
