""" Builders for map operations, to be passed to :func:`Client.operate`.

    Range operations select keys or values in the half-open interval
    [begin, end); a missing *end* means "to the end of the map". The
    relative range operations select by index or rank offset from a given
    key or value, which need not be present in the map.
"""

from . import opcodes
from .operations import CdtOperation


class order:
    UNORDERED = 0
    KEY_ORDERED = 1
    KEY_VALUE_ORDERED = 3


class write_mode:
    UPDATE = 0
    UPDATE_ONLY = 1
    CREATE_ONLY = 2


class write_flags:
    DEFAULT = 0
    CREATE_ONLY = 1
    UPDATE_ONLY = 2
    NO_FAIL = 4
    PARTIAL = 8


class return_type:
    NONE = 0
    INDEX = 1
    REVERSE_INDEX = 2
    RANK = 3
    REVERSE_RANK = 4
    COUNT = 5
    KEY = 6
    VALUE = 7
    KEY_VALUE = 8



class MapOperation(CdtOperation):

    cdt = 'map'



def set_policy(bin, policy):
    return MapOperation(opcodes.MAP_SET_POLICY, bin, policy=policy)


def put(bin, key, value, policy=None):
    return MapOperation(opcodes.MAP_PUT, bin, key=key, value=value)._optional(policy=policy)


def put_items(bin, items, policy=None):
    return MapOperation(opcodes.MAP_PUT_ITEMS, bin, items=items)._optional(policy=policy)


def increment(bin, key, incr, policy=None):
    return MapOperation(opcodes.MAP_INCREMENT, bin, key=key, incr=incr)._optional(policy=policy)


def decrement(bin, key, decr, policy=None):
    return MapOperation(opcodes.MAP_DECREMENT, bin, key=key, decr=decr)._optional(policy=policy)


def clear(bin):
    return MapOperation(opcodes.MAP_CLEAR, bin)


def size(bin):
    return MapOperation(opcodes.MAP_SIZE, bin)


# Removal.

def remove_by_key(bin, key, return_type=None):
    operation = MapOperation(opcodes.MAP_REMOVE_BY_KEY, bin, key=key)
    return operation._optional(return_type=return_type)


def remove_by_key_list(bin, keys, return_type=None):
    operation = MapOperation(opcodes.MAP_REMOVE_BY_KEY_LIST, bin, keys=keys)
    return operation._optional(return_type=return_type)


def remove_by_key_range(bin, begin, end=None, return_type=None):
    operation = MapOperation(opcodes.MAP_REMOVE_BY_KEY_RANGE, bin, begin=begin)
    return operation._optional(end=end, return_type=return_type)


def remove_by_key_rel_index_range(bin, key, index, count=None, return_type=None):
    """ Remove the map items whose index is *index* or more relative to
        *key*, up to *count* items.
    """

    operation = MapOperation(opcodes.MAP_REMOVE_BY_KEY_REL_INDEX_RANGE, bin, key=key, index=index)
    return operation._optional(count=count, return_type=return_type)


def remove_by_value(bin, value, return_type=None):
    operation = MapOperation(opcodes.MAP_REMOVE_BY_VALUE, bin, value=value)
    return operation._optional(return_type=return_type)


def remove_by_value_list(bin, values, return_type=None):
    operation = MapOperation(opcodes.MAP_REMOVE_BY_VALUE_LIST, bin, values=values)
    return operation._optional(return_type=return_type)


def remove_by_value_range(bin, begin, end=None, return_type=None):
    operation = MapOperation(opcodes.MAP_REMOVE_BY_VALUE_RANGE, bin, begin=begin)
    return operation._optional(end=end, return_type=return_type)


def remove_by_value_rel_rank_range(bin, value, rank, count=None, return_type=None):
    """ Remove the map items whose rank is *rank* or more relative to
        *value*, up to *count* items.
    """

    operation = MapOperation(opcodes.MAP_REMOVE_BY_VALUE_REL_RANK_RANGE, bin, value=value, rank=rank)
    return operation._optional(count=count, return_type=return_type)


def remove_by_index(bin, index, return_type=None):
    operation = MapOperation(opcodes.MAP_REMOVE_BY_INDEX, bin, index=index)
    return operation._optional(return_type=return_type)


def remove_by_index_range(bin, index, count=None, return_type=None):
    operation = MapOperation(opcodes.MAP_REMOVE_BY_INDEX_RANGE, bin, index=index)
    return operation._optional(count=count, return_type=return_type)


def remove_by_rank(bin, rank, return_type=None):
    operation = MapOperation(opcodes.MAP_REMOVE_BY_RANK, bin, rank=rank)
    return operation._optional(return_type=return_type)


def remove_by_rank_range(bin, rank, count=None, return_type=None):
    operation = MapOperation(opcodes.MAP_REMOVE_BY_RANK_RANGE, bin, rank=rank)
    return operation._optional(count=count, return_type=return_type)


# Retrieval.

def get_by_key(bin, key, return_type=None):
    operation = MapOperation(opcodes.MAP_GET_BY_KEY, bin, key=key)
    return operation._optional(return_type=return_type)


def get_by_key_range(bin, begin, end=None, return_type=None):
    operation = MapOperation(opcodes.MAP_GET_BY_KEY_RANGE, bin, begin=begin)
    return operation._optional(end=end, return_type=return_type)


def get_by_key_rel_index_range(bin, key, index, count=None, return_type=None):
    operation = MapOperation(opcodes.MAP_GET_BY_KEY_REL_INDEX_RANGE, bin, key=key, index=index)
    return operation._optional(count=count, return_type=return_type)


def get_by_value(bin, value, return_type=None):
    operation = MapOperation(opcodes.MAP_GET_BY_VALUE, bin, value=value)
    return operation._optional(return_type=return_type)


def get_by_value_range(bin, begin, end=None, return_type=None):
    operation = MapOperation(opcodes.MAP_GET_BY_VALUE_RANGE, bin, begin=begin)
    return operation._optional(end=end, return_type=return_type)


def get_by_value_rel_rank_range(bin, value, rank, count=None, return_type=None):
    operation = MapOperation(opcodes.MAP_GET_BY_VALUE_REL_RANK_RANGE, bin, value=value, rank=rank)
    return operation._optional(count=count, return_type=return_type)


def get_by_index(bin, index, return_type=None):
    operation = MapOperation(opcodes.MAP_GET_BY_INDEX, bin, index=index)
    return operation._optional(return_type=return_type)


def get_by_index_range(bin, index, count=None, return_type=None):
    operation = MapOperation(opcodes.MAP_GET_BY_INDEX_RANGE, bin, index=index)
    return operation._optional(count=count, return_type=return_type)


def get_by_rank(bin, rank, return_type=None):
    operation = MapOperation(opcodes.MAP_GET_BY_RANK, bin, rank=rank)
    return operation._optional(return_type=return_type)


def get_by_rank_range(bin, rank, count=None, return_type=None):
    operation = MapOperation(opcodes.MAP_GET_BY_RANK_RANGE, bin, rank=rank)
    return operation._optional(count=count, return_type=return_type)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
