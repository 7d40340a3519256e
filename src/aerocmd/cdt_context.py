""" Nested CDT context. A :class:`CdtContext` identifies a list or map nested
    within the bin targeted by a list or map operation; each step selects
    one element of the enclosing collection.
"""

LIST_INDEX = 0x10
LIST_RANK = 0x11
LIST_VALUE = 0x13
MAP_INDEX = 0x20
MAP_RANK = 0x21
MAP_KEY = 0x22
MAP_VALUE = 0x23


class CdtContext:
    """ An ordered sequence of (type, value) steps, outermost first. The
        add_* methods return the context itself so that calls can be chained.
    """

    def __init__(self):
        self.items = list()


    def _add(self, type, value):
        self.items.append((type, value))
        return self


    def add_list_index(self, index):
        return self._add(LIST_INDEX, index)


    def add_list_rank(self, rank):
        return self._add(LIST_RANK, rank)


    def add_list_value(self, value):
        return self._add(LIST_VALUE, value)


    def add_map_index(self, index):
        return self._add(MAP_INDEX, index)


    def add_map_rank(self, rank):
        return self._add(MAP_RANK, rank)


    def add_map_key(self, key):
        return self._add(MAP_KEY, key)


    def add_map_value(self, value):
        return self._add(MAP_VALUE, value)


    def to_list(self):
        return [[type, value] for type, value in self.items]


    def __len__(self):
        return len(self.items)


    def __eq__(self, other):
        if not isinstance(other, CdtContext):
            return NotImplemented
        return self.items == other.items


    def __repr__(self):
        return 'CdtContext(' + repr(self.items) + ')'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
