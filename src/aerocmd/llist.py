""" Large list (LDT) support. A :class:`LargeList` is a handle on an ordered
    collection stored in a single bin and manipulated exclusively through
    the server-side 'llist' UDF module. Each method translates its arguments
    into one invocation of that module via :func:`aerocmd.Client.apply`.

    Every method requires a callback as its last argument; it is invoked
    with the error and the UDF result. Some methods accept a filter, a
    dictionary with 'module', 'funcname' and 'args' entries naming a UDF
    that the server applies to each value before returning it.
"""

import asyncio
import os
import traceback

from . import status


def llist_error(code, message):
    """ Return a raw error structure for a failure detected while building
        a large list command, located at the innermost public LargeList
        method in the current call stack.
    """

    error = dict()
    error['code'] = code
    error['message'] = message

    for frame in reversed(traceback.extract_stack()):
        if frame.name == 'execute' or not hasattr(LargeList, frame.name):
            continue

        if os.path.abspath(frame.filename) != os.path.abspath(__file__):
            continue

        error['func'] = frame.name
        error['file'] = frame.filename
        error['line'] = frame.lineno
        break

    return error



def check_args(args, expected):
    """ Return True if *args* holds exactly the *expected* number of
        arguments. The last argument must be the callback; if it is not, the
        call shape is unrecognizable and :class:`TypeError` is raised.
    """

    if len(args) == 0 or not callable(args[-1]):
        raise TypeError('callback function must be passed for this async API')

    return len(args) == expected



class LargeList:
    """ A large list stored in the bin *bin_name* of the record identified
        by *key*. The *write_policy* applies to every command issued through
        this handle; *create_module* names the UDF module that configures the
        list when it is first created.
    """

    module = 'llist'

    def __init__(self, client, key, bin_name, write_policy=None, create_module=None):

        self.client = client
        self.key = key
        self.bin_name = bin_name
        self.write_policy = write_policy
        self.create_module = create_module


    def execute(self, funcname, args, expected, udf_position=None):
        """ Invoke the llist *funcname* with the given *args*, the last of
            which is the callback. The filter at *udf_position*, if any, is
            expanded into its module, function name and arguments.
        """

        valid = check_args(args, expected)
        callback = args[-1]

        if not valid:
            error = llist_error(status.ERR_PARAM, 'Invalid number of arguments')
            loop = asyncio.get_running_loop()
            loop.call_soon(self.client.callback_handler, callback, error)
            return

        udf_args = [self.bin_name]

        for position, argument in enumerate(args[:-1]):
            if position == udf_position:
                udf_args.append(argument['module'])
                udf_args.append(argument['funcname'])
                udf_args.append(argument['args'])
            else:
                udf_args.append(argument)

        udf_args.append(self.create_module)

        udf = dict()
        udf['module'] = self.module
        udf['funcname'] = funcname
        udf['args'] = udf_args

        self.client.apply(self.key, udf, self.write_policy, callback)


    def _bulk(self, name, args):
        if args and isinstance(args[0], list):
            return name + '_all'
        return name


    def add(self, *args):
        """ add(value, callback) or add([values], callback)
        """

        self.execute(self._bulk('add', args), args, 2)


    def update(self, *args):
        self.execute(self._bulk('update', args), args, 2)


    def remove(self, *args):
        self.execute(self._bulk('remove', args), args, 2)


    def remove_range(self, *args):
        """ remove_range(begin, end, callback)
        """

        self.execute('remove_range', args, 3)


    def find(self, *args):
        """ find(value, callback) or find(value, filter, callback)
        """

        if len(args) == 3:
            self.execute('find', args, 3, 1)
        else:
            self.execute('find', args, 2)


    def filter(self, *args):
        """ filter(filter, callback)
        """

        self.execute('filter', args, 2, 0)


    def find_range(self, *args):
        """ find_range(begin, end, callback) or
            find_range(begin, end, filter, callback)
        """

        if len(args) == 4:
            self.execute('range', args, 4, 2)
        else:
            self.execute('range', args, 3)


    def scan(self, *args):
        self.execute('scan', args, 1)


    def destroy(self, *args):
        self.execute('destroy', args, 1)


    def size(self, *args):
        self.execute('size', args, 1)


    def get_config(self, *args):
        self.execute('config', args, 1)


    def __repr__(self):
        return "LargeList(%r, %r)" % (self.key, self.bin_name)


# end of class LargeList


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
