""" Policy classes. A policy is a sparse set of per-command overrides layered
    over the defaults held by the transport: any attribute left as None means
    "inherit the default", and is omitted when the policy is handed to the
    transport.
"""


class key:
    DIGEST = 0
    SEND = 1


class exists:
    IGNORE = 0
    CREATE = 1
    UPDATE = 2
    REPLACE = 3
    CREATE_OR_REPLACE = 4


class gen:
    IGNORE = 0
    EQ = 1
    GT = 2


class replica:
    MASTER = 0
    ANY = 1


class consistency_level:
    ONE = 0
    ALL = 1


class commit_level:
    ALL = 0
    MASTER = 1



class BasePolicy:
    """ Base class for all policies. Attributes may be supplied either as a
        dictionary of *props* or as keyword arguments; the names recognized
        by a given policy class are listed in its *fields*. An unrecognized
        name is a programming error and raises :class:`TypeError`.
    """

    fields = ('timeout', 'max_retries')

    def __init__(self, props=None, **kwargs):

        for field in self.fields:
            setattr(self, field, None)

        if props is not None:
            if isinstance(props, BasePolicy):
                props = props.to_dict()
            self._update(props)

        self._update(kwargs)


    def _update(self, props):

        for name, value in props.items():
            if name in self.fields:
                setattr(self, name, value)
            else:
                raise TypeError("%s does not support the '%s' attribute" % (self.__class__.__name__, name))


    def to_dict(self):
        """ Return the populated attributes of this policy. Unset attributes
            are left out entirely, they are not defaulted.
        """

        result = dict()

        for field in self.fields:
            value = getattr(self, field)
            if value is not None:
                result[field] = value

        return result


    def __eq__(self, other):
        if not isinstance(other, BasePolicy):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()


    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.to_dict())


# end of class BasePolicy



class ReadPolicy(BasePolicy):
    fields = BasePolicy.fields + ('key', 'replica', 'consistency_level', 'deserialize')


class WritePolicy(BasePolicy):
    fields = BasePolicy.fields + ('compression_threshold', 'key', 'gen', 'exists', 'commit_level', 'durable_delete')


class RemovePolicy(BasePolicy):
    fields = BasePolicy.fields + ('generation', 'key', 'gen', 'commit_level', 'durable_delete')


class OperatePolicy(BasePolicy):
    fields = BasePolicy.fields + ('key', 'gen', 'replica', 'consistency_level', 'commit_level', 'deserialize', 'durable_delete')


class ApplyPolicy(BasePolicy):
    fields = BasePolicy.fields + ('key', 'commit_level', 'ttl', 'durable_delete')


class BatchPolicy(BasePolicy):
    fields = BasePolicy.fields + ('consistency_level', 'allow_inline', 'send_set_name', 'deserialize')


class InfoPolicy(BasePolicy):
    fields = ('timeout', 'send_as_is', 'check_bounds')


class QueryPolicy(BasePolicy):
    fields = BasePolicy.fields + ('deserialize',)


class ScanPolicy(BasePolicy):
    fields = BasePolicy.fields + ('fail_on_cluster_change', 'durable_delete')


class MapPolicy(BasePolicy):
    """ Policy for map operations: the map *order* and the *write_mode* (or
        the newer *write_flags*), see :mod:`aerocmd.maps`.
    """

    fields = ('order', 'write_mode', 'write_flags')


class ListPolicy(BasePolicy):
    """ Policy for list operations: the list *order* and the *write_flags*,
        see :mod:`aerocmd.lists`.
    """

    fields = ('order', 'write_flags')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
