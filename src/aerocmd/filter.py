""" Filter predicates that limit the scope of a :class:`aerocmd.query.Query`.
    Each predicate is evaluated by the server against a secondary index; the
    datatype of the index is inferred from the value when the predicate is
    built, so that a value the index cannot hold is rejected immediately.

    Only a single predicate per query is supported. More elaborate filtering
    can be done by a UDF applied to the query result set.
"""

from .datatypes import Double, GeoJSON


class predicates:
    EQUAL = 0
    RANGE = 1


class index_datatype:
    STRING = 0
    NUMERIC = 1
    GEO2DSPHERE = 2


class index_type:
    DEFAULT = 0
    LIST = 1
    MAPKEYS = 2
    MAPVALUES = 3



class FilterPredicate:

    def __init__(self, predicate, bin, datatype, type=None):

        if type is None:
            type = index_type.DEFAULT

        self.predicate = predicate
        self.bin = bin
        self.datatype = datatype
        self.type = type


    def to_dict(self):
        return dict(self.__dict__)


    def __eq__(self, other):
        if not isinstance(other, FilterPredicate):
            return NotImplemented
        return self.to_dict() == other.to_dict()


    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.to_dict())


# end of class FilterPredicate



class EqualPredicate(FilterPredicate):

    def __init__(self, bin, value, datatype, type=None):
        FilterPredicate.__init__(self, predicates.EQUAL, bin, datatype, type)
        self.val = value



class RangePredicate(FilterPredicate):

    def __init__(self, bin, min, max, datatype, type=None):
        FilterPredicate.__init__(self, predicates.RANGE, bin, datatype, type)
        self.min = min
        self.max = max



class GeoPredicate(FilterPredicate):

    def __init__(self, bin, value, type=None):
        FilterPredicate.__init__(self, predicates.RANGE, bin, index_datatype.GEO2DSPHERE, type)
        self.val = value



def datatype_of(value):
    """ Return the index datatype matching *value*. Booleans are rejected
        even though Python considers them integers; an index cannot hold
        them.
    """

    if isinstance(value, bool):
        pass
    elif isinstance(value, str):
        return index_datatype.STRING
    elif isinstance(value, (int, float, Double)):
        return index_datatype.NUMERIC

    raise TypeError('unknown data type for filter value: ' + type(value).__name__)



def equal(bin, value):
    """ Match records whose *bin* equals *value*, a string or a number.
    """

    return EqualPredicate(bin, value, datatype_of(value))



def contains(bin, value, index_type=None):
    """ Match records whose list or map *bin* contains *value*. The
        *index_type* selects list elements, map keys, or map values.
    """

    return EqualPredicate(bin, value, datatype_of(value), index_type)



def range(bin, min, max, index_type=None):
    """ Match records whose numeric *bin* lies within [min, max].
    """

    return RangePredicate(bin, min, max, index_datatype.NUMERIC, index_type)



def _geojson_string(value):

    if isinstance(value, GeoJSON):
        return str(value)
    if isinstance(value, dict):
        return str(GeoJSON(value))
    if isinstance(value, str):
        return value

    raise TypeError('not a valid GeoJSON value')



def geo_within(bin, value, index_type=None):
    """ Match records whose geospatial *bin* lies within the region
        described by *value*, a :class:`GeoJSON` or a plain dictionary.
    """

    return GeoPredicate(bin, _geojson_string(value), index_type)


geo_within_geojson_region = geo_within


def geo_contains(bin, value, index_type=None):
    """ Match records whose geospatial *bin* region contains the point
        described by *value*.
    """

    return GeoPredicate(bin, _geojson_string(value), index_type)


geo_contains_geojson_point = geo_contains


def geo_within_radius(bin, lng, lat, radius, index_type=None):
    circle = GeoJSON.Circle(lng, lat, radius)
    return GeoPredicate(bin, str(circle), index_type)


def geo_contains_point(bin, lng, lat, index_type=None):
    point = GeoJSON.Point(lng, lat)
    return GeoPredicate(bin, str(point), index_type)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
