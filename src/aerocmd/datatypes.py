""" Value wrappers for bin values that have no direct Python equivalent on
    the wire: GeoJSON regions and points, and explicitly typed doubles.
"""

from . import json


class GeoJSON:
    """ A GeoJSON value. The *value* is either the GeoJSON string itself or a
        dictionary that will be serialized to one. Anything else is rejected
        immediately.
    """

    def __init__(self, value):

        if isinstance(value, str):
            self.str = value
        elif isinstance(value, dict):
            self.str = json.dumps(value).decode()
        else:
            raise TypeError('not a valid GeoJSON value')


    @classmethod
    def Point(cls, lng, lat):
        value = dict()
        value['type'] = 'Point'
        value['coordinates'] = [lng, lat]
        return cls(value)


    @classmethod
    def Polygon(cls, *coordinates):
        value = dict()
        value['type'] = 'Polygon'
        value['coordinates'] = [list(coordinates)]
        return cls(value)


    @classmethod
    def Circle(cls, lng, lat, radius):
        value = dict()
        value['type'] = 'AeroCircle'
        value['coordinates'] = [[lng, lat], radius]
        return cls(value)


    def value(self):
        return json.loads(self.str)


    def __str__(self):
        return self.str


    def __repr__(self):
        return 'GeoJSON(' + repr(self.str) + ')'


    def __eq__(self, other):
        if not isinstance(other, GeoJSON):
            return NotImplemented
        return self.value() == other.value()


# end of class GeoJSON



class Double:
    """ Force a numeric *value* to be stored as a double, even if it happens
        to be integral.
    """

    def __init__(self, value):

        if isinstance(value, bool):
            raise TypeError('not a valid Double value')

        try:
            self.double = float(value)
        except (TypeError, ValueError):
            raise TypeError('not a valid Double value')

        if self.double != self.double:
            raise TypeError('not a valid Double value')


    def value(self):
        return self.double


    def __repr__(self):
        return 'Double(' + repr(self.double) + ')'


    def __eq__(self, other):
        if not isinstance(other, Double):
            return NotImplemented
        return self.double == other.double


# end of class Double


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
