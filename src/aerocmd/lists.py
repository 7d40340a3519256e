""" Builders for list operations, to be passed to :func:`Client.operate`.
    Index and rank arguments may be negative, counting back from the end of
    the list or from the highest rank; they are passed through as given and
    only the server checks the bounds. A *count* that is not supplied means
    "to the end of the list".
"""

from . import opcodes
from .error import ClientError
from .operations import CdtOperation


class order:
    UNORDERED = 0
    ORDERED = 1


class sort_flags:
    DEFAULT = 0
    DROP_DUPLICATES = 2


class write_flags:
    DEFAULT = 0
    ADD_UNIQUE = 1
    INSERT_BOUNDED = 2
    NO_FAIL = 4
    PARTIAL = 8


class return_type:
    NONE = 0
    INDEX = 1
    REVERSE_INDEX = 2
    RANK = 3
    REVERSE_RANK = 4
    COUNT = 5
    VALUE = 7
    INVERTED = 0x10000



class ListOperation(CdtOperation):

    cdt = 'list'

    def invert_selection(self):
        raise ClientError("list operation cannot be inverted [op %d]" % (self.op))


class InvertibleListOperation(ListOperation):
    """ A list operation whose selection can be inverted: the operation then
        applies to every element *not* selected by its arguments.
    """

    def invert_selection(self):
        self.inverted = True
        return self



def set_order(bin, order):
    return ListOperation(opcodes.LIST_SET_ORDER, bin, order=order)


def sort(bin, flags):
    return ListOperation(opcodes.LIST_SORT, bin, flags=flags)


def append(bin, value, policy=None):
    return ListOperation(opcodes.LIST_APPEND, bin, value=value)._optional(policy=policy)


def append_items(bin, list, policy=None):
    return ListOperation(opcodes.LIST_APPEND_ITEMS, bin, list=list)._optional(policy=policy)


def insert(bin, index, value, policy=None):
    return ListOperation(opcodes.LIST_INSERT, bin, index=index, value=value)._optional(policy=policy)


def insert_items(bin, index, list, policy=None):
    return ListOperation(opcodes.LIST_INSERT_ITEMS, bin, index=index, list=list)._optional(policy=policy)


def pop(bin, index):
    return ListOperation(opcodes.LIST_POP, bin, index=index)


def pop_range(bin, index, count=None):
    return ListOperation(opcodes.LIST_POP_RANGE, bin, index=index)._optional(count=count)


def remove(bin, index):
    return ListOperation(opcodes.LIST_REMOVE, bin, index=index)


def remove_range(bin, index, count=None):
    return ListOperation(opcodes.LIST_REMOVE_RANGE, bin, index=index)._optional(count=count)


def remove_by_index(bin, index, return_type=None):
    operation = ListOperation(opcodes.LIST_REMOVE_BY_INDEX, bin, index=index)
    return operation._optional(return_type=return_type)


def remove_by_index_range(bin, index, count=None, return_type=None):
    operation = InvertibleListOperation(opcodes.LIST_REMOVE_BY_INDEX_RANGE, bin, index=index)
    return operation._optional(count=count, return_type=return_type)


def remove_by_value(bin, value, return_type=None):
    operation = InvertibleListOperation(opcodes.LIST_REMOVE_BY_VALUE, bin, value=value)
    return operation._optional(return_type=return_type)


def remove_by_value_list(bin, values, return_type=None):
    operation = InvertibleListOperation(opcodes.LIST_REMOVE_BY_VALUE_LIST, bin, values=values)
    return operation._optional(return_type=return_type)


def remove_by_value_range(bin, begin, end, return_type=None):
    operation = InvertibleListOperation(opcodes.LIST_REMOVE_BY_VALUE_RANGE, bin)
    return operation._optional(begin=begin, end=end, return_type=return_type)


def remove_by_rank(bin, rank, return_type=None):
    operation = ListOperation(opcodes.LIST_REMOVE_BY_RANK, bin, rank=rank)
    return operation._optional(return_type=return_type)


def remove_by_rank_range(bin, rank, count=None, return_type=None):
    operation = InvertibleListOperation(opcodes.LIST_REMOVE_BY_RANK_RANGE, bin, rank=rank)
    return operation._optional(count=count, return_type=return_type)


def clear(bin):
    return ListOperation(opcodes.LIST_CLEAR, bin)


def set(bin, index, value):
    return ListOperation(opcodes.LIST_SET, bin, index=index, value=value)


def trim(bin, index, count):
    return ListOperation(opcodes.LIST_TRIM, bin, index=index, count=count)


def get(bin, index):
    return ListOperation(opcodes.LIST_GET, bin, index=index)


def get_range(bin, index, count=None):
    return ListOperation(opcodes.LIST_GET_RANGE, bin, index=index)._optional(count=count)


def get_by_index(bin, index, return_type=None):
    operation = ListOperation(opcodes.LIST_GET_BY_INDEX, bin, index=index)
    return operation._optional(return_type=return_type)


def get_by_index_range(bin, index, count=None, return_type=None):
    operation = InvertibleListOperation(opcodes.LIST_GET_BY_INDEX_RANGE, bin, index=index)
    return operation._optional(count=count, return_type=return_type)


def get_by_value(bin, value, return_type=None):
    operation = InvertibleListOperation(opcodes.LIST_GET_BY_VALUE, bin, value=value)
    return operation._optional(return_type=return_type)


def get_by_value_list(bin, values, return_type=None):
    operation = InvertibleListOperation(opcodes.LIST_GET_BY_VALUE_LIST, bin, values=values)
    return operation._optional(return_type=return_type)


def get_by_value_range(bin, begin, end, return_type=None):
    operation = InvertibleListOperation(opcodes.LIST_GET_BY_VALUE_RANGE, bin)
    return operation._optional(begin=begin, end=end, return_type=return_type)


def get_by_rank(bin, rank, return_type=None):
    operation = ListOperation(opcodes.LIST_GET_BY_RANK, bin, rank=rank)
    return operation._optional(return_type=return_type)


def get_by_rank_range(bin, rank, count=None, return_type=None):
    operation = InvertibleListOperation(opcodes.LIST_GET_BY_RANK_RANGE, bin, rank=rank)
    return operation._optional(count=count, return_type=return_type)


def increment(bin, index, value=None, policy=None):
    operation = ListOperation(opcodes.LIST_INCREMENT, bin, index=index)
    return operation._optional(value=value, policy=policy)


def size(bin):
    return ListOperation(opcodes.LIST_SIZE, bin)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
