""" The :class:`Client` is the principal entry point for applications. Every
    command accepts an optional callback as its last argument; if none is
    supplied, the command returns an :class:`asyncio.Future` instead. Either
    way, the outcome is always delivered on a later iteration of the event
    loop, never before the command method returns.

    Commands must be issued from code running on the asyncio event loop.
"""

import logging
import os

from . import filter
from . import operations
from . import runtime
from .command import (
    BatchCommand,
    Command,
    ConnectCommand,
    InfoCommand,
    RecordCommand,
    TaskCommand,
)
from .config import Config, parse_host
from .error import ClientError
from .llist import LargeList
from .policy import BasePolicy
from .query import Query, Scan
from .tasks import IndexTask, UdfTask
from . import transport


logger = logging.getLogger(__name__)


class language:
    LUA = 0



def normalize(optional, callback=None):
    """ Resolve the optional trailing arguments of a command, right to left.
        Unused slots are skipped; if the last supplied slot holds a callable
        and no explicit *callback* was given, that callable is the callback
        and its slot becomes None. Returns the resolved optional arguments
        as a list, and the callback.

        A *callback* that is not callable raises :class:`TypeError`, the
        only failure reported synchronously by a command.
    """

    optional = list(optional)

    if callback is None:
        for index in range(len(optional) - 1, -1, -1):
            value = optional[index]
            if value is None:
                continue

            if callable(value):
                callback = value
                optional[index] = None
            break

    if callback is not None and not callable(callback):
        raise TypeError('callback must be callable, not ' + type(callback).__name__)

    return optional, callback



class Client:
    """ A client connection to a cluster. The *config* is a dictionary or a
        :class:`aerocmd.config.Config` instance. The transport *engine*
        defaults to the one selected in :mod:`aerocmd.transport`; the
        runtime *context* defaults to :data:`aerocmd.runtime.default_context`.
        A *callback_handler* given here applies to this client only, instead
        of the process-wide default.
    """

    def __init__(self, config=None, engine=None, context=None, callback_handler=None):

        if isinstance(config, Config):
            self.config = config
        else:
            self.config = Config(config)

        if engine is None:
            engine = transport.DefaultEngine(self.config)
        if context is None:
            context = runtime.default_context

        self.engine = engine
        self.context = context
        self.connected = False
        self.connecting = None
        self._callback_handler = callback_handler


    @property
    def callback_handler(self):
        if self._callback_handler is not None:
            return self._callback_handler
        return self.context.callback_handler


    @staticmethod
    def set_callback_handler(handler, context=None):
        """ Replace the process-wide default callback handler. Commands
            already in flight keep the handler they started with.
        """

        if context is None:
            context = runtime.default_context

        context.callback_handler = handler


    # Connection management.

    def connect(self, callback=None):
        """ Connect to the cluster. The callback receives the error, if any,
            and this client; the future resolves to this client.
        """

        _, callback = normalize((), callback)
        command = ConnectCommand(self, callback)
        return command.execute()


    def close(self):

        if not self.connected:
            return

        self.connected = False
        self.engine.close()
        self.context.release()
        logger.debug('client closed')


    def is_connected(self, check_engine=False):
        """ Return the cached connection state. If *check_engine* is True
            the transport engine is also asked whether its connection is
            still usable.
        """

        connected = self.connected
        if connected and check_engine:
            connected = self.engine.is_connected()
        return connected


    # Single record commands.

    def get(self, key, policy=None, callback=None):
        (policy,), callback = normalize((policy,), callback)
        command = RecordCommand(self, 'get_async', key, (policy,), callback, 2)
        return command.execute()


    def select(self, key, bins, policy=None, callback=None):
        (policy,), callback = normalize((policy,), callback)
        command = RecordCommand(self, 'select_async', key, (bins, policy), callback, 2)
        return command.execute()


    def exists(self, key, policy=None, callback=None):
        (policy,), callback = normalize((policy,), callback)
        command = RecordCommand(self, 'exists_async', key, (policy,), callback, 1)
        return command.execute()


    def put(self, key, bins, meta=None, policy=None, callback=None):
        (meta, policy), callback = normalize((meta, policy), callback)
        command = RecordCommand(self, 'put_async', key, (bins, meta, policy), callback, 0)
        return command.execute()


    def remove(self, key, policy=None, callback=None):
        (policy,), callback = normalize((policy,), callback)
        command = RecordCommand(self, 'remove_async', key, (policy,), callback, 0)
        return command.execute()


    def operate(self, key, operations, meta=None, policy=None, callback=None):
        (meta, policy), callback = normalize((meta, policy), callback)
        command = RecordCommand(self, 'operate_async', key, (operations, meta, policy), callback, 2)
        return command.execute()


    def apply(self, key, udf, policy=None, callback=None):
        """ Apply the record UDF described by *udf*, a dictionary with
            'module', 'funcname' and 'args' entries, to the record.
        """

        (policy,), callback = normalize((policy,), callback)
        command = RecordCommand(self, 'apply_async', key, (udf, policy), callback, 1)
        return command.execute()

    execute = apply


    def _shortcut(self, builder, key, bins, meta, policy, callback):
        (meta, policy), callback = normalize((meta, policy), callback)

        ops = list()
        for bin, value in bins.items():
            ops.append(builder(bin, value))

        return self.operate(key, ops, meta, policy, callback)


    def append(self, key, bins, meta=None, policy=None, callback=None):
        return self._shortcut(operations.append, key, bins, meta, policy, callback)


    def prepend(self, key, bins, meta=None, policy=None, callback=None):
        return self._shortcut(operations.prepend, key, bins, meta, policy, callback)


    def incr(self, key, bins, meta=None, policy=None, callback=None):
        return self._shortcut(operations.incr, key, bins, meta, policy, callback)

    add = incr


    # Batch commands.

    def batch_get(self, keys, policy=None, callback=None):
        (policy,), callback = normalize((policy,), callback)
        command = BatchCommand(self, 'batch_get', keys, (policy,), callback)
        return command.execute()


    def batch_exists(self, keys, policy=None, callback=None):
        (policy,), callback = normalize((policy,), callback)
        command = BatchCommand(self, 'batch_exists', keys, (policy,), callback)
        return command.execute()


    def batch_select(self, keys, bins, policy=None, callback=None):
        (policy,), callback = normalize((policy,), callback)
        command = BatchCommand(self, 'batch_select', keys, (bins, policy), callback)
        return command.execute()


    # Secondary indexes.

    def create_index(self, options, policy=None, callback=None):
        """ Create a secondary index. The *options* dictionary names the
            'ns', 'set', 'bin' and 'index', the index 'datatype', and
            optionally the index 'type' for list and map bins. The result
            is an :class:`aerocmd.tasks.IndexTask`.
        """

        (policy,), callback = normalize((policy,), callback)

        request = dict()
        request['ns'] = options['ns']
        request['set'] = options.get('set')
        request['bin'] = options['bin']
        request['index'] = options['index']
        request['type'] = options.get('type', filter.index_type.DEFAULT)
        request['datatype'] = options.get('datatype')

        task = IndexTask(self, request['ns'], request['index'])
        command = TaskCommand(self, 'index_create', (request, policy), task, callback)
        return command.execute()


    def _typed_index(self, datatype, options, policy, callback):
        options = dict(options)
        options['datatype'] = datatype
        return self.create_index(options, policy, callback)


    def create_integer_index(self, options, policy=None, callback=None):
        return self._typed_index(filter.index_datatype.NUMERIC, options, policy, callback)


    def create_string_index(self, options, policy=None, callback=None):
        return self._typed_index(filter.index_datatype.STRING, options, policy, callback)


    def create_geo2dsphere_index(self, options, policy=None, callback=None):
        return self._typed_index(filter.index_datatype.GEO2DSPHERE, options, policy, callback)


    def index_create_wait(self, namespace, index, poll_interval=None, callback=None):
        """ Wait until the index *index* in *namespace* has been built on
            every node of the cluster.
        """

        task = IndexTask(self, namespace, index)
        return task.wait_until_done(poll_interval, callback)


    def index_remove(self, namespace, index, policy=None, callback=None):
        (policy,), callback = normalize((policy,), callback)
        command = Command(self, 'index_remove', (namespace, index, policy), callback)
        return command.execute()


    # User defined functions.

    def udf_register(self, filename, udf_type=None, policy=None, callback=None):
        """ Register the UDF module in the local file *filename*, written in
            *udf_type*, which defaults to :attr:`language.LUA`. The result
            is an :class:`aerocmd.tasks.UdfTask`.
        """

        (udf_type, policy), callback = normalize((udf_type, policy), callback)

        if isinstance(udf_type, BasePolicy):
            policy = udf_type
            udf_type = None

        if udf_type is None:
            udf_type = language.LUA

        module = os.path.basename(filename)
        task = UdfTask(self, module, UdfTask.REGISTER)
        command = TaskCommand(self, 'udf_register', (filename, udf_type, policy), task, callback)
        return command.execute()


    def udf_register_wait(self, filename, poll_interval=None, callback=None):
        """ Wait until the UDF module *filename* is present on every node of
            the cluster.
        """

        module = os.path.basename(filename)
        task = UdfTask(self, module, UdfTask.REGISTER)
        return task.wait_until_done(poll_interval, callback)


    def udf_remove(self, module, policy=None, callback=None):
        (policy,), callback = normalize((policy,), callback)
        task = UdfTask(self, module, UdfTask.UNREGISTER)
        command = TaskCommand(self, 'udf_remove', (module, policy), task, callback)
        return command.execute()


    # Info requests.

    def info(self, request=None, host=None, policy=None, info_callback=None, done_callback=None):
        """ Send the info *request* to the cluster, or to the single *host*
            if one is given, either as a 'host[:port]' string or as a
            dictionary with 'addr' and 'port' entries. The *info_callback*
            is invoked once per responding host with the error, the response
            text and the host; the *done_callback*, if any, is invoked once
            all responses have been delivered.

            The first callable found among the optional arguments is taken
            as the *info_callback*, and the argument after it as the
            *done_callback*.
        """

        arguments = [request, host, policy, info_callback, done_callback]

        for index in range(3):
            if callable(arguments[index]):
                info_callback = arguments[index]
                done_callback = arguments[index + 1]
                for slot in range(index, 3):
                    arguments[slot] = None
                break

        request, host, policy = arguments[:3]

        if info_callback is not None and not callable(info_callback):
            raise TypeError('info callback must be callable')
        if done_callback is not None and not callable(done_callback):
            raise TypeError('done callback must be callable')

        if isinstance(host, str):
            host = parse_host(host, self.config.port)

        command = InfoCommand(self, (request, host, policy), info_callback, done_callback)
        return command.execute()


    def info_all(self, request=None, policy=None, callback=None):
        """ Send the info *request* to every node. The result is a list of
            dictionaries with 'host' and 'info' entries, one per node.
        """

        (request, policy), callback = normalize((request, policy), callback)
        command = Command(self, 'info', (request, None, policy), callback)
        return command.execute()


    def info_any(self, request=None, policy=None, callback=None):
        """ Send the info *request* to a single node, chosen by the
            transport. The result is the response text.
        """

        (request, policy), callback = normalize((request, policy), callback)
        command = Command(self, 'info_any', (request, policy), callback)
        return command.execute()


    # Queries, scans and large lists.

    def query(self, namespace, set=None, options=None):
        """ Return a new :class:`aerocmd.query.Query`. Unlike the other
            commands there is no callback at this point; a disconnected
            client raises :class:`aerocmd.error.ClientError` immediately.
        """

        if not self.is_connected():
            raise ClientError('Not connected.')

        return Query(self, namespace, set, options)


    def scan(self, namespace, set=None, options=None):
        """ Return a new :class:`aerocmd.query.Scan`; a disconnected client
            raises :class:`aerocmd.error.ClientError` immediately, as for
            :func:`query`.
        """

        if not self.is_connected():
            raise ClientError('Not connected.')

        return Scan(self, namespace, set, options)


    def truncate(self, namespace, set=None, before_nanos=None, policy=None, callback=None):
        """ Remove every record in *namespace*, or only in *set*, last
            updated before *before_nanos*, in nanoseconds since the epoch.
            Zero, the default, removes all records regardless of age.
        """

        (set, before_nanos, policy), callback = normalize((set, before_nanos, policy), callback)

        if before_nanos is None:
            before_nanos = 0

        command = Command(self, 'truncate', (namespace, set, before_nanos, policy), callback)
        return command.execute()


    def large_list(self, key, bin_name, write_policy=None, create_module=None):
        return LargeList(self, key, bin_name, write_policy, create_module)



# end of class Client


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
