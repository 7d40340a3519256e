""" Secondary index queries and full scans. A :class:`Query` is built by
    :func:`aerocmd.Client.query`, refined with :func:`Query.where` and
    :func:`Query.select`, and executed with :func:`Query.foreach` or
    :func:`Query.results`. A :class:`Scan`, built by
    :func:`aerocmd.Client.scan`, walks every record of a namespace or set
    and is executed the same way.
"""

import logging

from .command import Command
from .error import CommandError


logger = logging.getLogger(__name__)


class priority:
    AUTO = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3



class RecordStream:
    """ Common ground for requests that deliver a stream of records from
        the given *namespace* and *set*. Subclasses name the engine
        *primitive* and build the :func:`statement` it receives.
    """

    primitive = None

    def __init__(self, client, namespace, set=None, options=None):

        if options is None:
            options = dict()

        self.client = client
        self.namespace = namespace
        self.set = set
        self.selected = list(options.get('select', ()))


    def select(self, *bins):
        """ Only return the named *bins* of each record.
        """

        self.selected = list(bins)
        return self


    def statement(self):
        raise NotImplementedError('statement() must be implemented by the subclass')


    def _command(self, policy, callback):
        args = (self.namespace, self.set, self.statement(), policy)
        return Command(self.client, self.primitive, args, callback)


    def foreach(self, record_callback, done_callback=None, policy=None):
        """ Execute the request. Each record is passed to the
            *record_callback* as a dictionary with 'bins', 'meta' and 'key'
            entries; once all records have been delivered, or upon error,
            the *done_callback* is invoked through the client's callback
            handler.
        """

        if not callable(record_callback):
            raise TypeError('record callback must be callable')

        if done_callback is not None and not callable(done_callback):
            raise TypeError('done callback must be callable')

        handler = self.client.callback_handler

        def completed(error, records=None):
            if CommandError.from_raw(error) is None:
                for record in records or ():
                    record_callback(record)
                error = None
            else:
                logger.debug("%s on %s.%s failed: %s", self.primitive, self.namespace, self.set, error)

            handler(done_callback, error)

        self._command(policy, completed).execute()


    def results(self, policy=None):
        """ Execute the request and return a future that resolves to the
            list of records.
        """

        return self._command(policy, None).execute()


# end of class RecordStream



class Query(RecordStream):
    """ A query against the given *namespace* and *set*. The optional
        *options* dictionary may specify 'filters', 'select' and 'udf', with
        the same meaning as the corresponding methods.
    """

    primitive = 'query'

    def __init__(self, client, namespace, set=None, options=None):

        RecordStream.__init__(self, client, namespace, set, options)

        if options is None:
            options = dict()

        self.filters = list(options.get('filters', ()))
        self.udf = options.get('udf')


    def where(self, predicate):
        """ Restrict the query with a filter *predicate* from
            :mod:`aerocmd.filter`. The server only honors a single
            predicate; a later call replaces an earlier one.
        """

        self.filters = [predicate]
        return self


    def set_udf(self, module, funcname, args=None):
        """ Apply a record UDF to every matching record.
        """

        udf = dict()
        udf['module'] = module
        udf['funcname'] = funcname
        udf['args'] = list(args) if args is not None else list()

        self.udf = udf
        return self


    def statement(self):

        statement = dict()
        statement['filters'] = list(self.filters)

        if self.selected:
            statement['select'] = list(self.selected)
        if self.udf is not None:
            statement['udf'] = self.udf

        return statement


# end of class Query



class Scan(RecordStream):
    """ A scan of every record in the given *namespace*, or only in *set*.
        The optional *options* dictionary may specify 'select', the scan
        'priority' (see :class:`priority`), the 'percent' of records to
        scan, 'nobins' to return only metadata, and 'concurrent' to scan
        all nodes in parallel.
    """

    primitive = 'scan'

    def __init__(self, client, namespace, set=None, options=None):

        RecordStream.__init__(self, client, namespace, set, options)

        if options is None:
            options = dict()

        self.priority = options.get('priority')
        self.percent = options.get('percent', 100)
        self.nobins = options.get('nobins', False)
        self.concurrent = options.get('concurrent', False)

        if not 0 < self.percent <= 100:
            raise ValueError('scan percent must be between 1 and 100')


    def statement(self):

        statement = dict()

        if self.selected:
            statement['select'] = list(self.selected)
        if self.priority is not None:
            statement['priority'] = self.priority

        statement['percent'] = self.percent
        statement['nobins'] = self.nobins
        statement['concurrent'] = self.concurrent
        return statement


# end of class Scan


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
