""" A :class:`Command` carries one request from a :class:`aerocmd.Client` to
    its transport engine, and carries the outcome back to the caller. The
    outcome is delivered either through a callback, via the callback handler
    in effect when the command was created, or by resolving the future that
    :func:`Command.execute` returns when no callback was supplied.

    Delivery is never synchronous: even an immediate failure, such as the
    client not being connected, is reported on a later iteration of the
    event loop.
"""

import asyncio
import logging

from . import status
from .error import ClientError, CommandError, status_code
from .key import Key
from .transport import TransportError


logger = logging.getLogger(__name__)


def client_error(message):
    """ Return a raw error structure for a failure detected on this side of
        the transport engine.
    """

    error = dict()
    error['code'] = status.ERR_CLIENT
    error['message'] = message
    return error



class Command:
    """ Invoke the engine primitive *name* with the *args*, followed by the
        completion callback. Subclasses may reshape the engine results by
        overriding :func:`convert_results`.
    """

    def __init__(self, client, name, args, callback=None):

        self.client = client
        self.name = name
        self.args = list(args)
        self.callback = callback
        self.handler = client.callback_handler
        self.loop = asyncio.get_running_loop()


    def convert_results(self, error, results):
        return results


    def rejected(self, exception):
        """ The engine refused the request outright; return the raw error
            to deliver in place of a result.
        """

        logger.debug("%s rejected by the transport: %s", self.name, exception)
        return client_error(str(exception))


    def connected(self):
        return self.client.is_connected()


    def execute(self):

        if not self.connected():
            return self.send_error('Not connected.')

        if self.callback is None:
            return self._execute_and_return_future()
        else:
            self._execute_with_callback(self._deliver)


    def process(self, completed):
        primitive = getattr(self.client.engine, self.name)
        primitive(*self.args, completed)


    def send_error(self, message):

        logger.debug("%s: %s", self.name, message)

        if self.callback is None:
            future = self.loop.create_future()
            future.set_exception(ClientError(message))
            return future

        self.loop.call_soon(self.handler, self.callback, client_error(message))


    def _deliver(self, error, *results):
        self.handler(self.callback, error, *results)


    def _execute_with_callback(self, deliver):

        # The engine may invoke the completion callback before process()
        # returns; such a delivery is pushed to the next loop iteration.

        sync = True

        def completed(error, *results):
            results = self.convert_results(error, results)
            if sync:
                self.loop.call_soon(deliver, error, *results)
            else:
                deliver(error, *results)

        try:
            self.process(completed)
        except TransportError as exception:
            error = self.rejected(exception)
            self.loop.call_soon(deliver, error)

        sync = False


    def _execute_and_return_future(self):

        future = self.loop.create_future()
        self._execute_with_callback(self._settler(future))
        return future


    def _settler(self, future):
        """ Return a delivery function that resolves *future*.
        """

        def settle(error, *results):
            if future.done():
                return

            exception = CommandError.from_raw(error)

            if exception is not None:
                future.set_exception(exception)
            elif len(results) == 0:
                future.set_result(None)
            elif len(results) == 1:
                future.set_result(results[0])
            else:
                future.set_result(results)

        return settle


# end of class Command



class RecordCommand(Command):
    """ A command on a single record. The record *key* is the first argument
        to the engine primitive, and is appended to the results handed to the
        caller; the engine results are padded to *result_count* first so that
        the key always lands in the same position.
    """

    def __init__(self, client, name, key, args, callback=None, result_count=0):

        Command.__init__(self, client, name, [key] + list(args), callback)
        self.key = key
        self.result_count = result_count


    def convert_results(self, error, results):

        results = list(results[:self.result_count])

        while len(results) < self.result_count:
            results.append(None)

        results.append(self.key)
        return tuple(results)


# end of class RecordCommand



class BatchCommand(Command):
    """ A command on a list of *keys*. The engine reports the records either
        in the order of the *keys*, or in any order provided each result
        names its record; it may leave out, or report as None, records that
        do not exist. The results are rearranged to match the order of the
        *keys*, see :func:`order_batch_results`.
    """

    def __init__(self, client, name, keys, args, callback=None):

        keys = list(keys)
        Command.__init__(self, client, name, [keys] + list(args), callback)
        self.keys = keys


    def convert_results(self, error, results):

        if status_code(error) != status.OK or len(results) == 0:
            return results

        ordered = order_batch_results(self.keys, results[0] or ())
        return (ordered,) + tuple(results[1:])


# end of class BatchCommand



def order_batch_results(keys, results):
    """ Return one result per entry in *keys*, in the same order.

        A result whose key can be compared with the input keys, by user key
        or by digest, is matched to the first unfilled input key it
        identifies; a key that appears more than once is matched to
        successive results for that key. Any other result, including one
        that reports only a digest for a key given by user key, is taken to
        belong to the input key at its own position, unless it plainly names
        another record. Entries that are not results, such as None, leave
        their position unfilled. Unfilled positions are reported as not
        found.

        Every result carries the caller's own :class:`aerocmd.Key`.
    """

    ordered = [None] * len(keys)
    positional = list()

    for position, result in enumerate(results):
        if not isinstance(result, dict):
            continue

        reported = result.get('key')
        matched = False

        for index, candidate in enumerate(keys):
            if ordered[index] is None and same_record(candidate, reported):
                ordered[index] = result
                matched = True
                break

        if not matched:
            positional.append((position, result))

    for position, result in positional:
        if position < len(keys) and ordered[position] is None:
            if same_record(keys[position], result.get('key')) is not False:
                ordered[position] = result
                continue

        logger.warning("batch result %d does not match any requested key", position)

    for index, result in enumerate(ordered):
        if result is None:
            result = dict()
            result['status'] = status.ERR_RECORD_NOT_FOUND
            result['record'] = None
            result['meta'] = None
        else:
            result = dict(result)

        result['key'] = keys[index]
        ordered[index] = result

    return ordered



def same_record(candidate, reported):
    """ Return True if the *reported* key names the same record as the
        *candidate* key, False if it names a different one, and None if the
        two share neither a user key nor a digest and so cannot be compared.
    """

    if not isinstance(candidate, Key) or not isinstance(reported, Key):
        return None

    if candidate.ns != reported.ns or candidate.set != reported.set:
        return False

    if candidate.key is not None and reported.key is not None:
        return candidate.key == reported.key

    if candidate.digest is not None and reported.digest is not None:
        return candidate.digest == reported.digest

    return None



class TaskCommand(Command):
    """ A cluster administration command whose sole result, on success, is a
        *task* that can be used to wait for the change to take effect on
        every node.
    """

    def __init__(self, client, name, args, task, callback=None):

        Command.__init__(self, client, name, args, callback)
        self.task = task


    def convert_results(self, error, results):

        if status_code(error) != status.OK:
            return ()

        return (self.task,)


# end of class TaskCommand



class InfoCommand(Command):
    """ An info request. Each host response is delivered separately to the
        *callback*, followed by a single invocation of the *done_callback*,
        if any. With no callback the future resolves to the full list of
        responses, and the *done_callback* is invoked once the future is
        done. Either way the *done_callback* also follows a failure.
    """

    def __init__(self, client, args, callback=None, done_callback=None):

        Command.__init__(self, client, 'info', args, callback)
        self.done_callback = done_callback


    def send_error(self, message):

        if self.callback is None:
            future = Command.send_error(self, message)
            self._done_with(future)
            return future

        logger.debug("%s: %s", self.name, message)
        self.loop.call_soon(self._deliver, client_error(message))


    def _execute_and_return_future(self):
        future = Command._execute_and_return_future(self)
        self._done_with(future)
        return future


    def _done_with(self, future):

        if self.done_callback is None:
            return

        def done(future):
            self.done_callback()

        future.add_done_callback(done)


    def _deliver(self, error, *results):

        responses = results[0] if results else None

        if status_code(error) != status.OK or not responses:
            self.handler(self.callback, error)
        else:
            for response in responses:
                self.handler(self.callback, None, response.get('info'), response.get('host'))

        if self.done_callback is not None:
            self.done_callback()


# end of class InfoCommand



class ConnectCommand(Command):
    """ Establish the client connection. The runtime context is acquired
        before the engine is contacted, and released again if the attempt
        fails, so that every successful connect pairs with one close.

        Only one attempt is made at a time: a connect issued while another
        is in flight waits for that attempt and reports its outcome.
    """

    def __init__(self, client, callback=None):
        Command.__init__(self, client, 'connect', (), callback)
        self.followers = list()


    def execute(self):

        if self.client.connected:
            return self._already_connected()

        if self.client.connecting is not None:
            return self._follow(self.client.connecting)

        self.client.connecting = self
        self.client.context.acquire(self.client.engine)

        if self.callback is None:
            return self._execute_and_return_future()
        else:
            self._execute_with_callback(self._deliver)


    def process(self, completed):
        self.client.engine.connect(completed)


    def convert_results(self, error, results):

        if status_code(error) == status.OK:
            logger.debug('client connected')
            self.client.connected = True
            results = (self.client,)
        else:
            logger.debug("connect failed: %s", error)
            self._abandon()
            results = ()

        self._finish(error)
        return results


    def rejected(self, exception):
        self._abandon()
        error = Command.rejected(self, exception)
        self._finish(error)
        return error


    def _abandon(self):
        self.client.connected = False
        self.client.engine.close()
        self.client.context.release()


    def _finish(self, error):
        """ The attempt is over; pass its outcome to every connect that
            waited on it.
        """

        if self.client.connecting is self:
            self.client.connecting = None

        followers = self.followers
        self.followers = list()

        for follower in followers:
            follower(error)


    def _follow(self, leader):

        logger.debug('connect already in progress')

        if self.callback is None:
            future = self.loop.create_future()
            deliver = self._settler(future)
        else:
            future = None
            deliver = self._deliver

        def finished(error):
            if status_code(error) == status.OK:
                self.loop.call_soon(deliver, None, self.client)
            else:
                self.loop.call_soon(deliver, error)

        leader.followers.append(finished)
        return future


    def _already_connected(self):

        if self.callback is None:
            future = self.loop.create_future()
            future.set_result(self.client)
            return future

        self.loop.call_soon(self.handler, self.callback, None, self.client)


# end of class ConnectCommand


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
