""" The :class:`Config` carries the client configuration handed to the
    transport engine. It only copies and validates recognized fields; it
    does not interpret them.
"""

import os
import re

from . import policy as policies


default_port = 3000
hosts_variable = 'AEROCMD_HOSTS'

_host = re.compile(r'^(\[[^\]]+\]|[^:\[\]]+)(?::(\d+))?$')

_policy_classes = {
    'apply': policies.ApplyPolicy,
    'batch': policies.BatchPolicy,
    'info': policies.InfoPolicy,
    'operate': policies.OperatePolicy,
    'query': policies.QueryPolicy,
    'read': policies.ReadPolicy,
    'remove': policies.RemovePolicy,
    'write': policies.WritePolicy,
}


class Config:
    """ Client configuration. The *config* is a dictionary; recognized keys
        are copied onto this instance, anything else is ignored.

        If no *hosts* are specified the value of the AEROCMD_HOSTS environment
        variable is used, falling back to localhost. Host lists given as a
        string are parsed with :func:`parse_hosts`.

        :ivar hosts: A list of dictionaries with 'addr' and 'port' keys.
        :ivar policies: Default policies, keyed by command type.
    """

    def __init__(self, config=None):

        if config is None:
            config = dict()

        self.user = None
        self.password = None
        self.log = None
        self.conn_timeout_ms = None
        self.tender_interval = None
        self.max_conns_per_node = None
        self.shared_memory = None
        self.policies = dict()

        user = config.get('user')
        if isinstance(user, str):
            self.user = user

        password = config.get('password')
        if isinstance(password, str):
            self.password = password

        port = config.get('port')
        if isinstance(port, int) and not isinstance(port, bool):
            self.port = port
        else:
            self.port = default_port

        hosts = config.get('hosts')
        if hosts is None:
            hosts = os.environ.get(hosts_variable)
        if hosts is None:
            hosts = 'localhost'

        self.hosts = _normalize_hosts(hosts, self.port)

        defaults = config.get('policies')
        if isinstance(defaults, dict):
            self.set_default_policies(defaults)

        log = config.get('log')
        if isinstance(log, dict):
            self.log = log

        for name in ('conn_timeout_ms', 'tender_interval', 'max_conns_per_node'):
            value = config.get(name)
            if isinstance(value, int) and not isinstance(value, bool):
                setattr(self, name, value)

        shared_memory = config.get('shared_memory')
        if isinstance(shared_memory, dict):
            self.shared_memory = shared_memory


    def set_default_policies(self, defaults):
        """ Establish the default policies. Each entry in *defaults* is either
            a policy instance or a dictionary of policy attributes.
        """

        for name, value in defaults.items():
            try:
                klass = _policy_classes[name]
            except KeyError:
                raise TypeError("unsupported default policy: '%s'" % (name))

            if value is None:
                continue
            elif isinstance(value, klass):
                self.policies[name] = value
            else:
                self.policies[name] = klass(value)


    def to_dict(self):

        result = dict()
        result['hosts'] = list(self.hosts)
        result['port'] = self.port

        for name in ('user', 'password', 'log', 'conn_timeout_ms', 'tender_interval', 'max_conns_per_node', 'shared_memory'):
            value = getattr(self, name)
            if value is not None:
                result[name] = value

        if self.policies:
            defaults = dict()
            for name, value in self.policies.items():
                defaults[name] = value.to_dict()
            result['policies'] = defaults

        return result


# end of class Config



def parse_host(host, port=default_port):
    """ Parse a single 'host[:port]' string into a dictionary with 'addr'
        and 'port' keys. IPv6 addresses must be enclosed in brackets if a
        port is specified.
    """

    host = host.strip()
    match = _host.match(host)

    if match is None:
        raise ValueError('invalid host specification: ' + repr(host))

    addr, explicit = match.groups()

    if addr.startswith('['):
        addr = addr[1:-1]

    if explicit is not None:
        port = int(explicit)

    parsed = dict()
    parsed['addr'] = addr
    parsed['port'] = port
    return parsed



def parse_hosts(hosts, port=default_port):
    """ Parse a comma-separated list of 'host[:port]' specifications.
    """

    parsed = list()

    for host in hosts.split(','):
        if host.strip() == '':
            continue
        parsed.append(parse_host(host, port))

    return parsed



def _normalize_hosts(hosts, port):

    if isinstance(hosts, str):
        return parse_hosts(hosts, port)

    normalized = list()

    for host in hosts:
        if isinstance(host, str):
            normalized.append(parse_host(host, port))
        else:
            entry = dict()
            entry['addr'] = host['addr']
            entry['port'] = host.get('port', port)
            normalized.append(entry)

    return normalized


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
