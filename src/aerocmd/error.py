""" Exception classes for errors delivered through the callback or future of
    a command. A :class:`ClientError` is generated within this package (not
    connected, bad argument count, transport refused the request); a
    :class:`ServerError` wraps a non-OK status reported by the transport.
"""

import re

from . import status


_status_name = re.compile(r'AEROSPIKE_[A-Z_]+')


class CommandError(Exception):
    """ Base class for all errors delivered to a command callback. The
        *code* is one of the :mod:`aerocmd.status` values; *func*, *file*
        and *line* describe where the error was raised, when known.

        :ivar in_doubt: True if a write may have completed despite the error.
    """

    def __init__(self, message=None, code=status.ERR_CLIENT):

        if message is None:
            message = 'Client Error'

        Exception.__init__(self, message)
        self.message = message
        self.code = code
        self.func = None
        self.file = None
        self.line = None
        self.in_doubt = False


    def __repr__(self):
        return "%s(%r, code=%d)" % (self.__class__.__name__, self.message, self.code)


    def is_server_error(self):
        return self.code > status.OK


    @classmethod
    def from_raw(cls, raw):
        """ Convert the *raw* error structure reported by the transport
            into a :class:`CommandError` instance. The structure is either
            a dictionary or an object with the same attribute names: code,
            message, func, file, line, and optionally in_doubt. Returns None
            if there is no error, or if the status code is OK.
        """

        if raw is None:
            return None

        if isinstance(raw, CommandError):
            return raw

        code = _field(raw, 'code', status.ERR_CLIENT)
        if code == status.OK:
            return None

        message = _format_message(_field(raw, 'message'), code)

        if code > status.OK:
            error = ServerError(message, code)
        else:
            error = ClientError(message, code)

        error.func = _field(raw, 'func')
        error.file = _field(raw, 'file')
        error.in_doubt = bool(_field(raw, 'in_doubt', False))

        line = _field(raw, 'line')
        if line is not None:
            try:
                line = int(line)
            except (TypeError, ValueError):
                line = None
        error.line = line

        return error


# end of class CommandError



class ClientError(CommandError):
    """ An error detected by this package before or instead of contacting
        the transport.
    """

    pass


class ServerError(CommandError):
    """ A non-OK status reported by the transport on behalf of the server.
    """

    def __init__(self, message=None, code=status.ERR_SERVER):
        CommandError.__init__(self, message, code)



def status_code(raw):
    """ Return the status code of a *raw* error structure. The absence of an
        error structure counts as success.
    """

    if raw is None:
        return status.OK

    return _field(raw, 'code', status.ERR_CLIENT)



def _field(raw, name, default=None):

    try:
        value = raw[name]
    except (KeyError, TypeError):
        value = getattr(raw, name, default)
    except IndexError:
        value = default

    if value is None:
        return default
    return value



def _format_message(message, code):
    """ The transport tends to prefix its messages with the symbolic name of
        the status code; swap that for the human-readable description.
    """

    if not message:
        message = status.get_message(code)
        return message

    described = status.get_message(code)
    if described is None:
        return message

    return _status_name.sub(lambda match: described, message, count=1)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
