""" Builders for the operation descriptors passed to :func:`Client.operate`.
    This module covers the scalar operations; see :mod:`aerocmd.lists` and
    :mod:`aerocmd.maps` for operations on list and map bins.

    A descriptor is a plain value: building one has no side effects, and two
    descriptors built from the same arguments compare equal.
"""

from . import opcodes
from .cdt_context import CdtContext


class Operation:
    """ A single operation on one bin of a record. The *op* is one of the
        :mod:`aerocmd.opcodes` values; the remaining attributes depend on
        the operation. Optional attributes that were not supplied are not
        present at all, the transport applies its own defaults for those.
    """

    cdt = None

    def __init__(self, op, bin=None, **fields):

        self.op = op
        self.bin = bin
        self.__dict__.update(fields)


    def _optional(self, **fields):

        for name, value in fields.items():
            if value is not None:
                setattr(self, name, value)

        return self


    def to_dict(self):
        """ Return the descriptor as a dictionary. Nested values (policies,
            contexts) are returned as-is; the transport codec is responsible
            for flattening them.
        """

        result = dict()
        result['op'] = self.op

        if self.bin is not None:
            result['bin'] = self.bin

        if self.cdt is not None:
            result['cdt'] = self.cdt

        for name, value in self.__dict__.items():
            if name == 'op' or name == 'bin':
                continue
            result[name] = value

        return result


    def __eq__(self, other):
        if not isinstance(other, Operation):
            return NotImplemented
        return self.to_dict() == other.to_dict()


    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.to_dict())


# end of class Operation



class CdtOperation(Operation):
    """ An operation on the internal structure of a list or map bin. The
        *cdt* discriminant distinguishes it from a scalar operation so that
        the transport can route it to the correct serializer.
    """

    def and_return(self, return_type):
        """ Set the *return_type*, which determines what data the operation
            returns: indexes, ranks, values, a count, or nothing.
        """

        self.return_type = return_type
        return self


    def with_context(self, context):
        """ Apply the operation to a list or map nested within the bin. The
            *context* is either a :class:`aerocmd.cdt_context.CdtContext`
            or a function that will be called with a fresh, empty context
            to populate.
        """

        if callable(context):
            populate = context
            context = CdtContext()
            populate(context)

        self.context = context
        return self


# end of class CdtOperation



def read(bin):
    return Operation(opcodes.READ, bin)


def write(bin, value):
    return Operation(opcodes.WRITE, bin, value=value)


def incr(bin, value):
    return Operation(opcodes.INCR, bin, value=value)


def append(bin, value):
    return Operation(opcodes.APPEND, bin, value=value)


def prepend(bin, value):
    return Operation(opcodes.PREPEND, bin, value=value)


def touch(ttl):
    """ Reset the time-to-live of the record to *ttl* seconds. This is a
        whole-record operation; it does not name a bin.
    """

    return Operation(opcodes.TOUCH, ttl=ttl)


# The shortcut methods on the Client are named after the operation they
# build; 'add' is the historical name for an increment.

add = incr


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
