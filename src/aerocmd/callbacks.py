""" Callback handlers translate the raw (error, *results) arguments reported
    by the transport engine into the arguments passed to a user callback. A
    handler is invoked as ``handler(callback, error, *results)``.

    The :func:`default_handler` converts a non-OK error into an instance of
    :class:`aerocmd.error.CommandError`, and passes None in its place on
    success. The :func:`legacy_handler` passes everything through untouched,
    including the raw status structure on success.
"""

from .error import CommandError


def default_handler(callback, error, *results):

    if callback is None:
        return

    exception = CommandError.from_raw(error)

    if exception is None:
        callback(None, *results)
    else:
        callback(exception)



def legacy_handler(callback, error, *results):

    if callback is None:
        return

    callback(error, *results)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
