''' JSON encoding for the frames exchanged with the gateway and for GeoJSON
    values. :func:`dumps` always returns bytes, so that the result can go
    straight into a multipart frame; :func:`loads` accepts bytes or str and
    raises :class:`DecodeError` on malformed input.
'''

import msgspec


encoder = msgspec.json.Encoder()
decoder = msgspec.json.Decoder()

dumps = encoder.encode
loads = decoder.decode

DecodeError = msgspec.DecodeError

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
