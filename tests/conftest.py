import pytest

import aerocmd

from fakeengine import FakeEngine


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def context():
    """ Each test gets its own runtime context, so that the reference count
        never leaks from one test into the next.
    """

    return aerocmd.runtime.RuntimeContext()


@pytest.fixture
def client(engine, context):
    return aerocmd.Client({'hosts': 'localhost'}, engine=engine, context=context)


@pytest.fixture
def key():
    return aerocmd.Key('test', 'demo', 'key1')

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
