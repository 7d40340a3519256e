""" Status codes reported by the transport engine and by this client. Every
    code is available under its full AEROSPIKE_* name as well as a short
    alias without the prefix. Negative codes originate on the client side,
    positive codes on the server side; zero is success.
"""

AEROSPIKE_ERR_INVALID_HOST = -4
AEROSPIKE_NO_MORE_RECORDS = -3
AEROSPIKE_ERR_PARAM = -2
AEROSPIKE_ERR_CLIENT = -1
AEROSPIKE_OK = 0
AEROSPIKE_ERR_SERVER = 1
AEROSPIKE_ERR_RECORD_NOT_FOUND = 2
AEROSPIKE_ERR_RECORD_GENERATION = 3
AEROSPIKE_ERR_REQUEST_INVALID = 4
AEROSPIKE_ERR_RECORD_EXISTS = 5
AEROSPIKE_ERR_BIN_EXISTS = 6
AEROSPIKE_ERR_CLUSTER_CHANGE = 7
AEROSPIKE_ERR_SERVER_FULL = 8
AEROSPIKE_ERR_TIMEOUT = 9
AEROSPIKE_ERR_ALWAYS_FORBIDDEN = 10
AEROSPIKE_ERR_CLUSTER = 11
AEROSPIKE_ERR_BIN_INCOMPATIBLE_TYPE = 12
AEROSPIKE_ERR_RECORD_TOO_BIG = 13
AEROSPIKE_ERR_RECORD_BUSY = 14
AEROSPIKE_ERR_SCAN_ABORTED = 15
AEROSPIKE_ERR_UNSUPPORTED_FEATURE = 16
AEROSPIKE_ERR_BIN_NOT_FOUND = 17
AEROSPIKE_ERR_DEVICE_OVERLOAD = 18
AEROSPIKE_ERR_RECORD_KEY_MISMATCH = 19
AEROSPIKE_ERR_NAMESPACE_NOT_FOUND = 20
AEROSPIKE_ERR_BIN_NAME = 21
AEROSPIKE_ERR_FAIL_FORBIDDEN = 22
AEROSPIKE_ERR_FAIL_ELEMENT_NOT_FOUND = 23
AEROSPIKE_ERR_FAIL_ELEMENT_EXISTS = 24
AEROSPIKE_QUERY_END = 50
AEROSPIKE_ERR_UDF = 100
AEROSPIKE_ERR_INDEX_FOUND = 200
AEROSPIKE_ERR_INDEX_NOT_FOUND = 201
AEROSPIKE_ERR_INDEX_OOM = 202
AEROSPIKE_ERR_INDEX_NOT_READABLE = 203
AEROSPIKE_ERR_INDEX = 204
AEROSPIKE_ERR_INDEX_NAME_MAXLEN = 205
AEROSPIKE_ERR_INDEX_MAXCOUNT = 206
AEROSPIKE_ERR_QUERY_ABORTED = 210
AEROSPIKE_ERR_QUERY_QUEUE_FULL = 211
AEROSPIKE_ERR_QUERY_TIMEOUT = 212
AEROSPIKE_ERR_QUERY = 213
AEROSPIKE_ERR_UDF_NOT_FOUND = 1301
AEROSPIKE_ERR_LUA_FILE_NOT_FOUND = 1302


_messages = {
    AEROSPIKE_ERR_INVALID_HOST: 'Host is invalid.',
    AEROSPIKE_NO_MORE_RECORDS: 'No more records available when parsing batch, scan or query records.',
    AEROSPIKE_ERR_PARAM: 'Invalid client API parameter.',
    AEROSPIKE_ERR_CLIENT: 'Generic client API usage error.',
    AEROSPIKE_OK: 'Generic success.',
    AEROSPIKE_ERR_SERVER: 'Generic error returned by the server.',
    AEROSPIKE_ERR_RECORD_NOT_FOUND: 'Record does not exist in database.',
    AEROSPIKE_ERR_RECORD_GENERATION: 'Generation of record in database does not satisfy write policy.',
    AEROSPIKE_ERR_REQUEST_INVALID: 'Request protocol invalid, or invalid protocol field.',
    AEROSPIKE_ERR_RECORD_EXISTS: 'Record already exists.',
    AEROSPIKE_ERR_BIN_EXISTS: 'Bin already exists.',
    AEROSPIKE_ERR_CLUSTER_CHANGE: 'A cluster state change occurred during the request.',
    AEROSPIKE_ERR_SERVER_FULL: 'The server node is running out of memory and/or storage device space reserved for the specified namespace.',
    AEROSPIKE_ERR_TIMEOUT: 'Request timed out.',
    AEROSPIKE_ERR_ALWAYS_FORBIDDEN: 'Operation not allowed in current configuration.',
    AEROSPIKE_ERR_CLUSTER: 'Generic cluster discovery and connection error.',
    AEROSPIKE_ERR_BIN_INCOMPATIBLE_TYPE: 'Bin modification operation cannot be done on an existing bin due to its value type.',
    AEROSPIKE_ERR_RECORD_TOO_BIG: 'Record being (re-)written cannot fit in a storage write block.',
    AEROSPIKE_ERR_RECORD_BUSY: 'Too many concurrent requests for one record.',
    AEROSPIKE_ERR_SCAN_ABORTED: 'Scan aborted by user.',
    AEROSPIKE_ERR_UNSUPPORTED_FEATURE: 'Sometimes our doc, or our customers wishes, get ahead of us.',
    AEROSPIKE_ERR_BIN_NOT_FOUND: 'Bin-level replace-only supported on server but not on client.',
    AEROSPIKE_ERR_DEVICE_OVERLOAD: 'The server node\'s storage device(s) can\'t keep up with the write load.',
    AEROSPIKE_ERR_RECORD_KEY_MISMATCH: 'Record key sent with transaction did not match key stored on server.',
    AEROSPIKE_ERR_NAMESPACE_NOT_FOUND: 'Namespace in request not found on server.',
    AEROSPIKE_ERR_BIN_NAME: 'Sent too-long bin name or exceeded namespace\'s bin name quota.',
    AEROSPIKE_ERR_FAIL_FORBIDDEN: 'Operation not allowed at this time.',
    AEROSPIKE_ERR_FAIL_ELEMENT_NOT_FOUND: 'Map element not found in UPDATE_ONLY write mode.',
    AEROSPIKE_ERR_FAIL_ELEMENT_EXISTS: 'Map element exists in CREATE_ONLY write mode.',
    AEROSPIKE_QUERY_END: 'There are no more records left for query.',
    AEROSPIKE_ERR_UDF: 'Generic UDF error.',
    AEROSPIKE_ERR_INDEX_FOUND: 'Index is found.',
    AEROSPIKE_ERR_INDEX_NOT_FOUND: 'Index not found.',
    AEROSPIKE_ERR_INDEX_OOM: 'Index is out of memory.',
    AEROSPIKE_ERR_INDEX_NOT_READABLE: 'Unable to read the index.',
    AEROSPIKE_ERR_INDEX: 'Generic secondary index error.',
    AEROSPIKE_ERR_INDEX_NAME_MAXLEN: 'Index name is too long.',
    AEROSPIKE_ERR_INDEX_MAXCOUNT: 'System already has maximum allowed indices.',
    AEROSPIKE_ERR_QUERY_ABORTED: 'Query was aborted.',
    AEROSPIKE_ERR_QUERY_QUEUE_FULL: 'Query processing queue is full.',
    AEROSPIKE_ERR_QUERY_TIMEOUT: 'Secondary index query timed out on server.',
    AEROSPIKE_ERR_QUERY: 'Generic query error.',
    AEROSPIKE_ERR_UDF_NOT_FOUND: 'UDF does not exist.',
    AEROSPIKE_ERR_LUA_FILE_NOT_FOUND: 'LUA file does not exist.',
}


def get_message(code):
    """ Return the human-readable description of a status *code*, or None
        if the code is not known.
    """

    try:
        return _messages[code]
    except KeyError:
        return None


def _aliases():

    module = globals()
    for name in list(module.keys()):
        if name.startswith('AEROSPIKE_'):
            module[name[len('AEROSPIKE_'):]] = module[name]

_aliases()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
