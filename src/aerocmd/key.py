""" The :class:`Key` identifies a single record: a namespace, an optional
    set, and either a user key or a digest (or both).
"""


class Key:
    """ A record key. The *ns* is required, as is at least one of *key* or
        *digest*. The transport fills in the digest after a write if it was
        not supplied; once a digest is present it cannot be changed.

        A :class:`Key` is handed back unmodified alongside command results
        so that callers can correlate a response with its request.
    """

    namespace_maximum = 32
    set_maximum = 64
    digest_length = 20

    def __init__(self, ns, set=None, key=None, digest=None):

        if not _valid_name(ns, self.namespace_maximum):
            raise TypeError("namespace must be a valid string (max. length %d)" % (self.namespace_maximum))

        if set is not None and not _valid_name(set, self.set_maximum):
            raise TypeError("set must be a valid string (max. length %d)" % (self.set_maximum))

        if key is not None and not _valid_user_key(key):
            raise TypeError('key must be a string, integer, or bytes')

        if digest is not None and not self._valid_digest(digest):
            raise TypeError("digest must be %d bytes" % (self.digest_length))

        if key is None and digest is None:
            raise TypeError('either key or digest must be set')

        self.ns = ns
        self.set = set
        self.key = key
        self._digest = digest


    @property
    def digest(self):
        return self._digest


    @digest.setter
    def digest(self, digest):

        if self._digest is not None:
            if digest == self._digest:
                return
            raise AttributeError('the digest of a Key cannot be changed once set')

        if not self._valid_digest(digest):
            raise TypeError("digest must be %d bytes" % (self.digest_length))

        self._digest = digest


    def _valid_digest(self, digest):
        return isinstance(digest, (bytes, bytearray)) and len(digest) == self.digest_length


    def __eq__(self, other):

        if not isinstance(other, Key):
            return NotImplemented

        if self.ns != other.ns or self.set != other.set:
            return False

        if self.key is not None and other.key is not None:
            return self.key == other.key

        if self.digest is not None and other.digest is not None:
            return self.digest == other.digest

        return False


    def __hash__(self):
        # Two keys may be equal by user key or by digest; only the namespace
        # and set are common to both comparisons.
        return hash((self.ns, self.set))


    def __repr__(self):
        return "Key(%r, %r, %r)" % (self.ns, self.set, self.key)


    def to_dict(self):
        result = dict()
        result['ns'] = self.ns
        result['set'] = self.set
        result['key'] = self.key
        result['digest'] = self.digest
        return result


    @classmethod
    def from_dict(cls, values):
        return cls(values['ns'], values.get('set'), values.get('key'), values.get('digest'))


# end of class Key



def _valid_name(name, maximum):
    return isinstance(name, str) and 0 < len(name) <= maximum


def _valid_user_key(key):

    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    if isinstance(key, str):
        return len(key) > 0
    if isinstance(key, (bytes, bytearray)):
        return len(key) > 0

    return False


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
