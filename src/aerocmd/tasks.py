""" Tasks track cluster-wide changes that complete asynchronously on the
    server side, after the command initiating them has returned: secondary
    index creation and UDF module (de)registration. Progress is checked by
    polling every node with an info request.
"""

import asyncio
import logging

from . import info
from . import status
from .error import CommandError


logger = logging.getLogger(__name__)

default_poll_interval = 1.0


class Task:
    """ Base class for tasks. Subclasses define the info *request* used to
        poll the cluster and :func:`has_completed` to interpret the parsed
        responses, one per node.
    """

    request = None

    def __init__(self, client):
        self.client = client


    def has_completed(self, responses):
        raise NotImplementedError('has_completed() must be implemented by the subclass')


    def tolerated(self, error):
        """ Return True if *error* means "not done yet" rather than failure.
        """

        return False


    async def check_status(self):
        """ Poll the cluster once; return True if the task is complete.
        """

        try:
            responses = await self.client.info_all(self.request)
        except CommandError as error:
            if self.tolerated(error):
                return False
            raise

        parsed = list()
        for response in responses or ():
            parsed.append(info.parse(response.get('info')))

        return self.has_completed(parsed)


    async def _poll(self, poll_interval):

        while True:
            done = await self.check_status()
            if done:
                return

            logger.debug("%s not yet complete, polling again in %.2f sec", self.request, poll_interval)
            await asyncio.sleep(poll_interval)


    def wait_until_done(self, poll_interval=None, callback=None):
        """ Poll until the task is complete. If a *callback* is supplied it
            is invoked once, through the client's callback handler, with the
            error if polling failed; otherwise a future is returned.
        """

        if callable(poll_interval) and callback is None:
            callback = poll_interval
            poll_interval = None

        if callback is not None and not callable(callback):
            raise TypeError('callback must be callable')

        if poll_interval is None:
            poll_interval = default_poll_interval

        future = asyncio.ensure_future(self._poll(poll_interval))

        if callback is None:
            return future

        handler = self.client.callback_handler

        def finished(future):
            if future.cancelled():
                return
            handler(callback, future.exception())

        future.add_done_callback(finished)

    wait = wait_until_done


# end of class Task



class IndexTask(Task):
    """ Track the creation of the secondary index *index* in *namespace*.
        The index is ready once every node reports a load percentage of 100.
    """

    def __init__(self, client, namespace, index):

        Task.__init__(self, client)
        self.namespace = namespace
        self.index = index
        self.request = 'sindex/' + namespace + '/' + index


    def tolerated(self, error):
        return error.code == status.ERR_INDEX_NOT_FOUND


    def has_completed(self, responses):

        if len(responses) == 0:
            return False

        for response in responses:
            stats = response.get(self.request)
            if not isinstance(stats, dict):
                return False

            percent = stats.get('load_pct', 0)
            if 0 <= percent < 100:
                return False

        return True


# end of class IndexTask



class UdfTask(Task):
    """ Track the registration, or removal, of the UDF *module* on every
        node of the cluster.
    """

    REGISTER = 'register'
    UNREGISTER = 'unregister'

    request = 'udf-list'

    def __init__(self, client, module, command):

        Task.__init__(self, client)
        self.module = module
        self.command = command


    def has_completed(self, responses):

        expected = self.command == self.REGISTER

        for response in responses:
            modules = response.get(self.request) or ()
            present = False

            for module in modules:
                if isinstance(module, dict) and module.get('filename') == self.module:
                    present = True
                    break

            if present != expected:
                return False

        return True


# end of class UdfTask


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
