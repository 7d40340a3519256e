""" Operation codes understood by the transport engine's operation
    serializer. Keep these in one place; the list and map modules only
    refer to them by name.
"""

# Scalar operations.

WRITE = 0
READ = 1
INCR = 2
PREPEND = 3
APPEND = 4
TOUCH = 5

# List operations.

LIST_APPEND = 6
LIST_APPEND_ITEMS = 7
LIST_INSERT = 8
LIST_INSERT_ITEMS = 9
LIST_POP = 10
LIST_POP_RANGE = 11
LIST_REMOVE = 12
LIST_REMOVE_RANGE = 13
LIST_CLEAR = 14
LIST_SET = 15
LIST_TRIM = 16
LIST_GET = 17
LIST_GET_RANGE = 18
LIST_INCREMENT = 19
LIST_SIZE = 20

# Map operations.

MAP_SET_POLICY = 21
MAP_PUT = 22
MAP_PUT_ITEMS = 23
MAP_INCREMENT = 24
MAP_DECREMENT = 25
MAP_CLEAR = 26
MAP_REMOVE_BY_KEY = 27
MAP_REMOVE_BY_KEY_LIST = 28
MAP_REMOVE_BY_KEY_RANGE = 29
MAP_REMOVE_BY_VALUE = 30
MAP_REMOVE_BY_VALUE_LIST = 31
MAP_REMOVE_BY_VALUE_RANGE = 32
MAP_REMOVE_BY_INDEX = 33
MAP_REMOVE_BY_INDEX_RANGE = 34
MAP_REMOVE_BY_RANK = 35
MAP_REMOVE_BY_RANK_RANGE = 36
MAP_SIZE = 37
MAP_GET_BY_KEY = 38
MAP_GET_BY_KEY_RANGE = 39
MAP_GET_BY_VALUE = 40
MAP_GET_BY_VALUE_RANGE = 41
MAP_GET_BY_INDEX = 42
MAP_GET_BY_INDEX_RANGE = 43
MAP_GET_BY_RANK = 44
MAP_GET_BY_RANK_RANGE = 45

# Later additions; the numbering continues rather than being regrouped so
# that existing codes never change.

LIST_SET_ORDER = 46
LIST_SORT = 47
LIST_REMOVE_BY_INDEX = 48
LIST_REMOVE_BY_INDEX_RANGE = 49
LIST_REMOVE_BY_VALUE = 50
LIST_REMOVE_BY_VALUE_LIST = 51
LIST_REMOVE_BY_VALUE_RANGE = 52
LIST_REMOVE_BY_RANK = 53
LIST_REMOVE_BY_RANK_RANGE = 54
LIST_GET_BY_INDEX = 55
LIST_GET_BY_INDEX_RANGE = 56
LIST_GET_BY_VALUE = 57
LIST_GET_BY_VALUE_LIST = 58
LIST_GET_BY_VALUE_RANGE = 59
LIST_GET_BY_RANK = 60
LIST_GET_BY_RANK_RANGE = 61
MAP_REMOVE_BY_KEY_REL_INDEX_RANGE = 62
MAP_REMOVE_BY_VALUE_REL_RANK_RANGE = 63
MAP_GET_BY_KEY_REL_INDEX_RANGE = 64
MAP_GET_BY_VALUE_REL_RANK_RANGE = 65


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
