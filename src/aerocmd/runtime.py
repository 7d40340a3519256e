""" Process-wide runtime state shared by every :class:`aerocmd.Client`. The
    :class:`RuntimeContext` keeps count of the clients that are currently
    connected, so that the transport engine's event loop machinery is
    registered when the first client connects and released when the last one
    closes. It also holds the default callback handler.

    One instance, :data:`default_context`, lives for the lifetime of the
    process; it is the context used by any client that is not handed one
    explicitly.
"""

import logging
import threading

from . import callbacks


logger = logging.getLogger(__name__)


class RuntimeContext:
    """ Count active clients and drive the event loop hooks on the 0 to 1 and
        1 to 0 transitions. The *hooks* passed to :func:`acquire` must offer
        ``register_event_loop()`` and ``deregister_event_loop()`` methods;
        the transport engine does.

        Clients running their own event loops in separate threads may share
        one context; the count and the hooks are guarded by a lock.
    """

    def __init__(self, callback_handler=callbacks.default_handler):

        self.callback_handler = callback_handler
        self.count = 0
        self.hooks = None
        self._lock = threading.Lock()


    def acquire(self, hooks):
        """ Register one more active client. The hooks are only invoked, and
            only remembered, if this is the first active client.
        """

        with self._lock:
            previous = self.count
            self.count += 1

            if previous == 0:
                self.hooks = hooks
                logger.debug('registering event loop')
                hooks.register_event_loop()


    def release(self):
        """ Release one active client. Releasing more often than acquiring is
            a programming error; it is logged and otherwise ignored, the count
            never goes negative.
        """

        with self._lock:
            if self.count == 0:
                logger.warning('runtime context released without a matching acquire')
                return

            self.count -= 1

            if self.count == 0:
                hooks = self.hooks
                self.hooks = None
                if hooks is not None:
                    logger.debug('deregistering event loop')
                    hooks.deregister_event_loop()


    @property
    def active(self):
        return self.count


# end of class RuntimeContext



default_context = RuntimeContext()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
